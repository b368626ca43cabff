"""Scripts evaluated inside the page by the element commands."""

# Takes {selector, options}. `selector` is a string or a [section, target]
# pair; `options` mirrors ResolveOptions. Clicks the first match, if any.
RESOLVE_AND_CLICK_SCRIPT = """
({ selector, options }) => {
    const hasJquery = typeof window.jQuery === 'function';
    const useJquery = Boolean(options.use_jquery) && hasJquery;

    const pick = (elements) => {
        if (!elements || !elements.length) {
            return [];
        }
        return options.return_all ? Array.from(elements) : [elements[0]];
    };

    const resolve = () => {
        if (Array.isArray(selector)) {
            const sectionSelector = selector[0];
            const targetSelector = selector[1];

            if (useJquery) {
                return window.jQuery(sectionSelector).find(targetSelector).toArray();
            }

            const sections = document.querySelectorAll(sectionSelector);
            if (!sections.length) {
                return [];
            }
            return pick(sections[0].querySelectorAll(targetSelector));
        }

        if (useJquery) {
            return window.jQuery(selector).toArray();
        }
        return pick(document.querySelectorAll(selector));
    };

    const elements = resolve();
    if (elements.length) {
        elements[0].click();
    }

    return {
        clicked: elements.length > 0,
        matched: elements.length,
        jquery: useJquery,
    };
}
"""
