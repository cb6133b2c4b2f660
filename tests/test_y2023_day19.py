import pytest

from advent.y2023_day19 import parse, part1, part2

EXAMPLE = """px{a<2006:qkq,m>2090:A,rfg}
pv{a>1716:R,A}
lnx{m>1548:A,A}
rfg{s<537:gd,x>2440:R,A}
qs{s>3448:A,lnx}
qkq{x<1416:A,crn}
crn{x>2662:A,R}
in{s<1351:px,qqz}
qqz{s>2770:qs,m<1801:hdj,R}
gd{a>3333:R,R}
hdj{m>838:A,pv}

{x=787,m=2655,a=1222,s=2876}
{x=1679,m=44,a=2067,s=496}
{x=2036,m=264,a=79,s=2244}
{x=2461,m=1339,a=466,s=291}
{x=2127,m=1623,a=2188,s=1012}
"""


def test_part2_example():
    assert part2(EXAMPLE) == 167409079868000


def test_parse_rules_and_parts():
    workflows, parts = parse("in{x>10:A,R}\n\n{x=11,m=1,a=2,s=3}\n")
    assert workflows == {"in": ((("x", ">", 10, "A"),), "R")}
    assert parts == [{"x": 11, "m": 1, "a": 2, "s": 3}]


def test_part1_simple():
    text = "in{x>10:A,R}\n\n{x=11,m=1,a=1,s=1}\n{x=5,m=1,a=1,s=1}\n"
    assert part1(text) == 11 + 1 + 1 + 1


def test_part2_accept_all():
    assert part2("in{A}\n\n") == 4000**4


def test_part2_reject_all():
    assert part2("in{R}\n\n") == 0


def test_part2_split_is_complementary():
    accepted_high = part2("in{x>2000:A,R}\n\n")
    accepted_low = part2("in{x>2000:R,A}\n\n")
    assert accepted_high + accepted_low == 4000**4
    assert accepted_high == 2000 * 4000**3


def test_workflow_loop_raises():
    with pytest.raises(ValueError):
        part1("in{aa}\naa{in}\n\n{x=1,m=1,a=1,s=1}\n")


def test_bad_rule_raises():
    with pytest.raises(ValueError):
        parse("in{x=5:A,R}\n\n")