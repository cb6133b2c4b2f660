"""Scratchcards: winning numbers and copies of cards."""

from collections import Counter


def card_matches(text):
    """Number of winning numbers held on each card, in card order."""
    matches = []
    for line in text.splitlines():
        if not line.strip():
            continue
        _, sep, numbers = line.partition(":")
        winning, bar, held = numbers.partition("|")
        if not sep or not bar:
            raise ValueError(f"not a scratchcard: {line!r}")
        winning_numbers = winning.split()
        matches.append(sum(number in winning_numbers for number in held.split()))
    return matches


def part1(text):
    """Total points, doubling for every match after the first."""
    return sum(2 ** (count - 1) for count in card_matches(text) if count)


def part2(text):
    """Total scratchcards held once every won copy has been scored.

    Copies won past the last card count as cards with no matches.
    """
    matches = dict(enumerate(card_matches(text), start=1))
    copies = Counter({card: 1 for card in matches})
    last = len(matches)
    total = 0
    card = 1
    while card <= last:
        count = copies[card]
        total += count
        won = matches.get(card, 0)
        for offset in range(1, won + 1):
            copies[card + offset] += count
        last = max(last, card + won)
        card += 1
    return total