import pytest

from aoc2021.scanner3d import (
    MergeError,
    Scanner3d,
    manhattan_distance,
    merge_scanners,
    parse_scanners,
)
from aoc2021.structures import Queue
from aoc2021.vector import Vector3d

EXAMPLE = """--- scanner 0 ---
404,-588,-901
528,-643,409
-838,591,734
390,-675,-793
-537,-823,-458
-485,-357,347
-345,-311,381
-661,-816,-575
-876,649,763
-618,-824,-621
553,345,-567
474,580,667
-447,-329,318
-584,868,-557
544,-627,-890
564,392,-477
455,729,728
-892,524,684
-689,845,-530
423,-701,434
7,-33,-71
630,319,-379
443,580,662
-789,900,-551
459,-707,401

--- scanner 1 ---
686,422,578
605,423,415
515,917,-361
-336,658,858
95,138,22
-476,619,847
-340,-569,-846
567,-361,727
-460,603,-452
669,-402,600
729,430,532
-500,-761,534
-322,571,750
-466,-666,-811
-429,-592,574
-355,545,-477
703,-491,-529
-328,-685,520
413,935,-424
-391,539,-444
586,-435,557
-364,-763,-893
807,-499,-711
755,-354,-619
553,889,-390

--- scanner 2 ---
649,640,665
682,-795,504
-784,533,-524
-644,584,-595
-588,-843,648
-30,6,44
-674,560,763
500,723,-460
609,671,-379
-555,-800,653
-675,-892,-343
697,-426,-610
578,704,681
493,664,-388
-671,-858,530
-667,343,800
571,-461,-707
-138,-166,112
-889,563,-600
646,-828,498
640,759,510
-630,509,768
-681,-892,-333
673,-379,-804
-742,-814,-386
577,-820,562

--- scanner 3 ---
-589,542,597
605,-692,669
-500,565,-823
-660,373,557
-458,-679,-417
-488,449,543
-626,468,-788
338,-750,-386
528,-832,-391
562,-778,733
-938,-730,414
543,643,-506
-524,371,-870
407,773,750
-104,29,83
378,-903,-323
-778,-728,485
426,699,580
-438,-605,-362
-469,-447,-387
509,732,623
647,635,-688
-868,-804,481
614,-800,639
595,780,-596

--- scanner 4 ---
727,592,562
-293,-554,779
441,611,-461
-714,465,-776
-743,427,-804
-660,-479,-426
832,-632,460
927,-485,-438
408,393,-506
466,436,-512
110,16,151
-258,-428,682
-393,719,612
-211,-452,876
808,-476,-593
-575,615,604
-485,667,467
-680,325,-822
-627,-443,-432
872,-547,-609
833,512,582
807,604,487
839,-516,451
891,-625,532
-652,-548,-490
30,-46,-14
"""


@pytest.fixture
def lines():
    return EXAMPLE.splitlines()


def test_parse_scanners(lines):
    scanners = parse_scanners(lines)
    assert [s.name for s in scanners] == [f"scanner {i}" for i in range(5)]
    assert [len(s.beacons) for s in scanners] == [25, 25, 26, 25, 26]
    assert scanners[0].beacons[0].position == Vector3d(404, -588, -901)


def test_first_comparisons(lines):
    scanners = parse_scanners(lines)
    composite = scanners[0]

    new_beacons, shared, position = composite.compare(scanners[1])
    assert shared == 12
    assert position == Vector3d(68, -1246, -43)
    assert len(new_beacons) == 13

    composite.add_beacons(new_beacons)
    assert len(composite.beacons) == 38

    _, shared, position = composite.compare(scanners[4])
    assert shared == 12
    assert position == Vector3d(-20, -1133, 1061)


def test_translated_beacons_land_in_scanner_zero_frame(lines):
    scanners = parse_scanners(lines)
    new_beacons, _, _ = scanners[0].compare(scanners[1])
    positions = {b.position for b in new_beacons}
    # scanner 1's beacon 95,138,22 seen from scanner 0
    assert Vector3d(-27, -1108, -65) in positions


def test_full_merge_by_queue(lines):
    scanners = parse_scanners(lines)
    composite = scanners[0]
    queue = Queue()
    for scanner in scanners[1:]:
        queue.push(scanner)

    last = composite
    while queue:
        scanner = queue.shift()
        assert scanner is not last
        last = scanner
        new_beacons, count, _ = composite.compare(scanner)
        if count > 0:
            composite.add_beacons(new_beacons)
        else:
            queue.push(scanner)

    assert len(composite.beacons) == 79


def test_merge_scanners(lines):
    composite, positions = merge_scanners(lines)
    assert len(composite.beacons) == 79
    assert len(positions) == 5
    assert positions[0] == Vector3d(0, 0, 0)
    assert {
        Vector3d(68, -1246, -43),
        Vector3d(-20, -1133, 1061),
        Vector3d(1105, -1205, 1229),
        Vector3d(-92, -2380, -20),
    } <= set(positions)


def test_manhattan_distance():
    a = Vector3d(1105, -1205, 1229)
    b = Vector3d(-92, -2380, -20)
    assert manhattan_distance(a, b) == 3621
    assert manhattan_distance(b, a) == 3621


def test_no_overlap_comparison(lines):
    scanners = parse_scanners(lines)
    lone = parse_scanners(["--- lone ---", "1,2,3"])[0]
    result = scanners[0].compare(lone)
    assert result.shared == 0
    assert result.beacons == []
    assert result.scanner_position == Vector3d(0, 0, 0)


def test_merge_fails_on_unmatchable_scanner():
    lines = ["--- scanner 0 ---", "1,2,3", "", "--- scanner 1 ---", "4,5,6"]
    with pytest.raises(MergeError, match="repeat scanner"):
        merge_scanners(lines)


def test_merge_without_scanners_fails():
    with pytest.raises(MergeError):
        merge_scanners([])


def test_invalid_beacon_raises():
    with pytest.raises(ValueError):
        parse_scanners(["--- scanner 0 ---", "1,2"])


def test_add_beacons_records_edges_both_ways():
    scanner = parse_scanners(["--- s ---", "0,0,0"])[0]
    new = parse_scanners(["--- t ---", "1,2,3"])[0].beacons
    scanner.add_beacons(new)
    assert scanner.beacons[0].edges == {(1, 2, 3): [Vector3d(-1, -2, -3)]}
    assert scanner.beacons[1].edges == {(1, 2, 3): [Vector3d(1, 2, 3)]}


def test_str_contains_name_and_positions():
    scanner = Scanner3d("probe")
    scanner.add_beacons(parse_scanners(["--- t ---", "1,2,3"])[0].beacons)
    text = str(scanner)
    assert text.startswith("\n--- probe ---")
    assert "position: {1 2 3}" in text
    assert text.endswith("\n")