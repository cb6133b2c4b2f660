"""Binary diagnostic: power consumption and life support rating."""


def part1(report):
    """Gamma rate multiplied by epsilon rate."""
    if not report:
        raise ValueError("empty report")
    gamma = ""
    epsilon = ""
    for column in zip(*report):
        ones = column.count("1")
        if ones > len(column) - ones:
            gamma += "1"
            epsilon += "0"
        else:
            gamma += "0"
            epsilon += "1"
    return int(gamma, 2) * int(epsilon, 2)


def _filter_rating(report, keep_ones):
    candidates = list(report)
    if not candidates:
        raise ValueError("No solution found")
    for index in range(len(candidates[0])):
        ones = sum(line[index] == "1" for line in candidates)
        zeros = len(candidates) - ones
        wanted = "1" if keep_ones(ones, zeros) else "0"
        candidates = [line for line in candidates if line[index] == wanted]
        if len(candidates) == 1:
            return int(candidates[0], 2)
        if not candidates:
            break
    raise ValueError("No solution found")


def oxygen_rating(report):
    """Keep the most common bit at each position, ties preferring 1."""
    return _filter_rating(report, lambda ones, zeros: ones >= zeros)


def scrubber_rating(report):
    """Keep the least common bit at each position, ties preferring 0."""
    return _filter_rating(report, lambda ones, zeros: ones < zeros)


def part2(report):
    """Oxygen generator rating multiplied by CO2 scrubber rating."""
    return oxygen_rating(report) * scrubber_rating(report)