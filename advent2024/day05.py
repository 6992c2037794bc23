"""Day 5: check and repair the page order of safety manual updates."""


def parse(text):
    """Return the set of ordering rules and the list of updates."""
    lines = iter(text.splitlines())
    rules = set()
    for line in lines:
        if not line:
            break
        parts = line.split("|")
        if len(parts) < 2:
            raise ValueError(f"malformed rule: {line!r}")
        rules.add((int(parts[0]), int(parts[1])))
    updates = [[int(page) for page in line.split(",")] for line in lines]
    return rules, updates


def _in_order(update, rules):
    return not any(
        (later, earlier) in rules
        for index, earlier in enumerate(update)
        for later in update[index:]
    )


def _reordered(update, rules):
    """The update with rule violations swapped away, or None if none were found."""
    pages = list(update)
    fixed = False
    for i in range(len(pages)):
        for j in range(i, len(pages)):
            if (pages[j], pages[i]) in rules:
                pages[i], pages[j] = pages[j], pages[i]
                fixed = True
    return pages if fixed else None


def _middle(update):
    if not update:
        raise ValueError("an update needs at least one page")
    return update[(len(update) - 1) // 2]


def part1(text):
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse(text)
    return sum(_middle(update) for update in updates if _in_order(update, rules))


def part2(text):
    """Sum of middle pages of updates that needed reordering."""
    rules, updates = parse(text)
    repaired = (_reordered(update, rules) for update in updates)
    return sum(_middle(pages) for pages in repaired if pages is not None)