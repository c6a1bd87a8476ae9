"""
Tests for the daily puzzle solvers.

Each day is checked against the worked example from its puzzle text.
Long-running parts are exercised through their helpers on smaller inputs.

Usage:
    pytest tests/test_days.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aoc.days import (
    day01, day02, day03, day04, day05, day06, day07, day08, day09, day10,
    day11, day12, day13, day14, day15, day16, day17, day18, day19, day20,
    day21, day22, day23, day24, day25,
)
from aoc.solver import SolveError

DAY01 = """\
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""

DAY02 = "A Y\nB X\nC Z\n"

DAY03 = """\
vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""

DAY04 = """\
2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8
"""

DAY05 = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)

DAY07 = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""

DAY08 = "30373\n25512\n65332\n33549\n35390\n"

DAY09 = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
DAY09_LARGER = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"

DAY11 = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""

DAY12 = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n"

DAY13 = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""

DAY14 = "498,4 -> 498,6 -> 496,6\n503,4 -> 502,4 -> 502,9 -> 494,9\n"

DAY15 = """\
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""

DAY16 = """\
Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""

DAY17 = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>\n"

DAY18 = """\
2,2,2
1,2,2
3,2,2
2,1,2
2,3,2
2,2,1
2,2,3
2,2,4
2,2,6
1,2,5
3,2,5
2,1,5
2,3,5
"""

DAY19 = (
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian.\n"
    "Blueprint 2: Each ore robot costs 2 ore. Each clay robot costs 3 ore. "
    "Each obsidian robot costs 3 ore and 8 clay. Each geode robot costs 3 ore and 12 obsidian.\n"
)

DAY20 = "1\n2\n-3\n3\n-2\n0\n4\n"

DAY21 = """\
root: pppw + sjmn
dbpl: 5
cczh: sllz + lgvd
zczc: 2
ptdq: humn - dvpt
dvpt: 3
lfqf: 4
humn: 5
ljgn: 2
sjmn: drzm * dbpl
sllz: 4
pppw: cczh / lfqf
lgvd: ljgn * ptdq
drzm: hmdt - zczc
hmdt: 32
"""

DAY22 = (
    "        ...#\n"
    "        .#..\n"
    "        #...\n"
    "        ....\n"
    "...#.......#\n"
    "........#...\n"
    "..#....#....\n"
    "..........#.\n"
    "        ...#....\n"
    "        .....#..\n"
    "        .#......\n"
    "        ......#.\n"
    "\n"
    "10R5L5R10L4R5L5\n"
)

DAY23 = """\
....#..
..###.#
#...#.#
.#...##
#.###..
##.#.##
.#..#..
"""

DAY24 = """\
#.######
#>>.<^<#
#.<..<<#
#>v.><>#
#<^v^^>#
######.#
"""

DAY25 = """\
1=-0-2
12111
2=0=
21
2=01
111
20012
112
1=-1=
1-12
12
1=
122
"""


@pytest.mark.parametrize("solve, text, expected", [
    (day01.solve_a, DAY01, 24000),
    (day01.solve_b, DAY01, 45000),
    (day02.solve_a, DAY02, 15),
    (day02.solve_b, DAY02, 12),
    (day03.solve_a, DAY03, 157),
    (day03.solve_b, DAY03, 70),
    (day04.solve_a, DAY04, 2),
    (day04.solve_b, DAY04, 4),
    (day05.solve_a, DAY05, "CMZ"),
    (day05.solve_b, DAY05, "MCD"),
    (day06.solve_a, "mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7),
    (day06.solve_b, "mjqjpqmgbljsphdztnvjfqwrcgsmlb", 19),
    (day06.solve_a, "bvwbjplbgvbhsrlpgdmjqwftvncz", 5),
    (day07.solve_a, DAY07, 95437),
    (day07.solve_b, DAY07, 24933642),
    (day08.solve_a, DAY08, 21),
    (day08.solve_b, DAY08, 8),
    (day09.solve_a, DAY09, 13),
    (day09.solve_b, DAY09, 1),
    (day09.solve_b, DAY09_LARGER, 36),
    (day11.solve_a, DAY11, 10605),
    (day11.solve_b, DAY11, 2713310158),
    (day12.solve_a, DAY12, 31),
    (day12.solve_b, DAY12, 29),
    (day13.solve_a, DAY13, 13),
    (day13.solve_b, DAY13, 140),
    (day14.solve_a, DAY14, 24),
    (day14.solve_b, DAY14, 93),
    (day16.solve_a, DAY16, 1651),
    (day16.solve_b, DAY16, 1707),
    (day17.solve_a, DAY17, 3068),
    (day17.solve_b, DAY17, 1514285714288),
    (day18.solve_a, DAY18, 64),
    (day18.solve_b, DAY18, 58),
    (day19.solve_a, DAY19, 33),
    (day20.solve_a, DAY20, 3),
    (day20.solve_b, DAY20, 1623178306),
    (day21.solve_a, DAY21, 152),
    (day21.solve_b, DAY21, 301),
    (day22.solve_a, DAY22, 6032),
    (day22.solve_b, DAY22, 5031),
    (day23.solve_a, DAY23, 110),
    (day23.solve_b, DAY23, 20),
    (day24.solve_a, DAY24, 18),
    (day24.solve_b, DAY24, 54),
    (day25.solve_a, DAY25, "2=-1=0"),
])
def test_worked_examples(solve, text, expected):
    assert solve(text) == expected


def test_crlf_input_is_accepted():
    assert day01.solve_a(DAY01.replace("\n", "\r\n")) == 24000


def test_register_values():
    assert list(day10.register_values("noop\naddx 3\naddx -5")) == [1, 1, 1, 4, 4]


def test_signal_strength_with_constant_register():
    assert day10.solve_a("noop") == 720


def test_crt_rendering():
    rows = day10.solve_b("\n".join(["noop"] * 240))
    assert rows == ["###" + "." * 37] * 6


def test_sensor_helpers():
    """Test the beacon exclusion helpers on the example's smaller grid."""
    sensors = day15.read_sensors(DAY15)
    assert day15.excluded_positions(sensors, 10) == 26
    assert day15.find_beacon(sensors, 20) == (14, 11)


def test_single_cube_pair():
    assert day18.solve_a("1,1,1\n2,1,1\n") == 10
    assert day18.solve_b("1,1,1\n2,1,1\n") == 10


def test_blueprint_geodes():
    blueprint = day19.read_blueprints(DAY19)[0]
    assert day19.max_geodes(blueprint, 24) == 9


def test_snafu_conversion():
    assert day25.from_snafu("1=-0-2") == 1747
    assert day25.to_snafu(4890) == "2=-1=0"
    assert day25.to_snafu(0) == "0"
    assert day25.solve_b("") == "Start The Blender"


@pytest.mark.parametrize("solve, text, reason", [
    (day04.solve_a, "1-2,3\n", "invalid"),
    (day05.solve_a, "[A]\n 1 \n\nmove 2 from 1 to 1\n", "does not have"),
    (day07.solve_a, "$ cd /\n$ cd ..\n", "past root"),
    (day10.solve_a, "jump 4\n", "unknown instruction"),
    (day11.solve_a, DAY11.replace("divisible by 23", "divisible by 0"), "divisor must be positive"),
    (day13.solve_a, "[\"x\"]\n[\"y\"]\n", "only hold integers and lists"),
    (day13.solve_b, "[null]\n[1]\n", "only hold integers and lists"),
    (day21.solve_a, "root: aaaa + bbbb\naaaa: bbbb * 2\nbbbb: aaaa - 1\n", "depends on itself"),
    (day20.solve_a, "1\n2\n", "exactly one 0"),
    (day24.solve_a, "#.#\n#.#\n", "at least 3 lines"),
    (day25.solve_a, "12x\n", "invalid SNAFU digit"),
])
def test_invalid_input(solve, text, reason):
    with pytest.raises(SolveError, match=reason):
        solve(text)
