"""Print queue: check page updates against ordering rules and fix the bad ones."""

from __future__ import annotations

from collections import defaultdict

from .solution import Solution

Rules = dict[int, list[int]]
Update = list[int]


def _parse_u8(token: str) -> int:
    digits = token[1:] if token.startswith("+") else token
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid page number {token!r}")
    value = int(digits)
    if value > 255:
        raise ValueError(f"page number out of range {token!r}")
    return value


def update_is_valid(rules: Rules, update: Update) -> bool:
    """Whether no page appears after a page that must come after it."""
    seen: set[int] = set()
    disallowed: set[int] = set()
    for page in update:
        if page in disallowed:
            return False
        disallowed.update(prev for prev in rules.get(page, ()) if prev not in seen)
        seen.add(page)
    return True


def idxs_to_swap(rules: Rules, update: Update) -> tuple[int, int] | None:
    """The first out-of-order page and the earliest page it should precede.

    Returns None when the update already follows the rules.
    """
    seen: set[int] = set()
    disallowed: dict[int, list[int]] = defaultdict(list)
    for page_idx, page in enumerate(update):
        if page in disallowed:
            return page_idx, disallowed[page][0]
        for prev in rules.get(page, ()):
            if prev not in seen:
                disallowed[prev].append(page_idx)
        seen.add(page)
    return None


def reorder_update(rules: Rules, update: Update) -> None:
    """Swap pages in place until the update follows the rules."""
    while (pair := idxs_to_swap(rules, update)) is not None:
        a, b = pair
        update[a], update[b] = update[b], update[a]


class Day05(Solution):
    """Sum the middle pages of correct updates, then of corrected ones."""

    def parse_input(self, input_lines: str) -> tuple[Rules, list[Update]]:
        sections = input_lines.split("\n\n")
        if len(sections) < 2:
            raise ValueError("expected rules and updates separated by a blank line")
        rules_text, updates_text = sections[0], sections[1]

        rules: Rules = {}
        for rule in rules_text.splitlines():
            parts = rule.split("|")
            if len(parts) < 2:
                raise ValueError(f"invalid rule {rule!r}")
            first, second = _parse_u8(parts[0]), _parse_u8(parts[1])
            rules.setdefault(second, []).append(first)

        updates = [
            [_parse_u8(value) for value in line.split(",")]
            for line in updates_text.splitlines()
        ]
        return rules, updates

    def part_one(self, parsed_input: tuple[Rules, list[Update]]) -> str:
        rules, updates = parsed_input
        return str(
            sum(
                update[len(update) // 2]
                for update in updates
                if update_is_valid(rules, update)
            )
        )

    def part_two(self, parsed_input: tuple[Rules, list[Update]]) -> str:
        rules, updates = parsed_input
        total = 0
        for update in updates:
            if not update_is_valid(rules, update):
                reorder_update(rules, update)
                total += update[len(update) // 2]
        return str(total)