"""Camel cards: rank poker-like hands."""

from collections import Counter

_CARD_VALUES = {
    "A": 14,
    "K": 13,
    "Q": 12,
    "J": 11,
    "T": 10,
    "9": 9,
    "8": 8,
    "7": 7,
    "6": 6,
    "5": 5,
    "4": 4,
    "3": 3,
    "2": 2,
}
_JOKER_VALUES = {**_CARD_VALUES, "J": 1}

_TYPES = {
    (5,): 7,
    (1, 4): 6,
    (2, 3): 5,
    (1, 1, 3): 4,
    (1, 2, 2): 3,
    (1, 1, 1, 2): 2,
}

_ONE_JOKER = {(1, 4): 7, (1, 1, 3): 6, (1, 2, 2): 5, (1, 1, 1, 2): 4}
_TWO_JOKERS = {(2, 3): 7, (1, 2, 2): 6, (1, 1, 1, 2): 4}
_THREE_JOKERS = {(2, 3): 7, (1, 1, 3): 6}


def _counts(hand):
    return tuple(sorted(Counter(hand).values()))


def hand_type(hand):
    """Strength of a hand, from 1 (high card) to 7 (five of a kind)."""
    return _TYPES.get(_counts(hand), 1)


def hand_type_with_jokers(hand):
    """Strength of a hand when each J stands in for the best card."""
    counts = _counts(hand)
    jokers = hand.count("J")
    if jokers == 0:
        return _TYPES.get(counts, 1)
    if jokers == 1:
        return _ONE_JOKER.get(counts, 2)
    if jokers == 2:
        return _TWO_JOKERS.get(counts, 1)
    if jokers == 3:
        return _THREE_JOKERS.get(counts, 1)
    return 7


def _hands(text):
    hands = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"not a hand and bid: {line!r}")
        hands.append((fields[0], int(fields[1])))
    return hands


def _winnings(text, rank_type, values):
    ranked = sorted(
        _hands(text),
        key=lambda item: (rank_type(item[0]), [values.get(card, 0) for card in item[0][:5]]),
    )
    return sum(rank * bid for rank, (_, bid) in enumerate(ranked, start=1))


def part1(text):
    """Total winnings with J as a jack."""
    return _winnings(text, hand_type, _CARD_VALUES)


def part2(text):
    """Total winnings with J as a weak joker."""
    return _winnings(text, hand_type_with_jokers, _JOKER_VALUES)