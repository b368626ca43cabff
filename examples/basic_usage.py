"""Click a section-scoped link and wait for the resulting title."""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from browser_commands import BrowserSession, load_globals


async def main():
    """Open example.com, follow its link and wait for the next page's title."""
    globals_ = load_globals(Path(__file__).parent / ".env")

    async with BrowserSession(headless=False, verbose=2, globals_=globals_) as session:
        print(f"✓ Session started: {session.session_id}")

        await session.page.goto("https://example.com")
        print(f"✓ Navigated to: {session.page.url}")

        results = await (
            session.host.wait_for_title(lambda title: "Example" in title)
                .jquery_click(["div", "a"])
                .wait_for_title(lambda title: title != "Example Domain", 10000, "left example.com")
                .perform()
        )

        for result in results:
            if result.status == "completed":
                mark = "✓" if result.passed else "✗"
                print(f"{mark} {result.command}: {result.message}")
            else:
                print(f"✗ {result.command} rejected: {result.reason}")

        failed = session.host.assertions.failed
        print(f"\n{len(session.host.assertions) - len(failed)} passed, {len(failed)} failed")


if __name__ == "__main__":
    asyncio.run(main())
