import pytest

from aoc2021.trench_map import Image, main, parse_image, part_one, part_two

EXAMPLE_ENHANCER_LINES = (
    "..#.#..###" "##.#.#.#.#" "##.##....." "###.##.#.." "###.####..",
    "#####..#.." "..#..#..##" "..###..###" "###.###..." "####..#..#",
    "####..##.." "#.#####..." "##.#.#..#." "##..#.#..." "...#.###.#",
    "#####.###." "####...#.#" "#.##..#..#" "..#####..." "..#.#....#",
    "##..#.##.." "....#....." "#..#..#..#" "#..#...##." "######.###",
    "#.####.#.#" "...#......" ".#..#.#.#." "..####.##." "#......#..",
    "#...##.#.#" "#..#...##." "#.##..###." "#......#.#" ".......#.#",
    ".#.####.##" "#.##...#.." "...####.#." ".#..#.##.#" "....##..#.",
    "####....##" "...##..#.." ".#......#." "#.......#." "......##..",
    "####..#..." "#.#.#...##" "..#.#..###" "..#####..." ".....#..##",
    "##......#." ".#",
)
EXAMPLE_IMAGE = "#..#.\n#....\n##..#\n..#..\n..###"
EXAMPLE = "\n".join(EXAMPLE_ENHANCER_LINES) + "\n\n" + EXAMPLE_IMAGE + "\n"

ALTERNATING = "".join("#" if k % 2 == 0 else "." for k in range(512))


def test_parse_example():
    image, enhancer = parse_image(EXAMPLE)
    assert len(enhancer) == 512
    assert enhancer[34] == "#"
    assert str(image) == EXAMPLE_IMAGE + "\n"
    assert image.lit_count() == 10
    assert image.infinite_pixel == "."
    assert image.next_infinite_pixel == "."


def test_part_one_example():
    assert part_one(EXAMPLE) == 35


def test_part_two_example():
    assert part_two(EXAMPLE) == 3351


def test_enhance_grows_image_by_one_each_side():
    image, enhancer = parse_image(EXAMPLE)
    bigger = image.enhance(enhancer)
    assert (bigger.width, bigger.height) == (image.width + 2, image.height + 2)


def test_single_pixel_first_enhancement():
    image, enhancer = parse_image(ALTERNATING + "\n\n#")
    assert image.pixels == ((True,),)
    assert image.lit_count() == 1
    assert image.infinite_pixel == "."
    assert image.next_infinite_pixel == "#"

    enhanced = image.enhance(enhancer)
    assert enhanced.infinite_pixel == "#"
    assert enhanced.next_infinite_pixel == "."
    assert str(enhanced) == ".##\n###\n###\n"
    assert enhanced.lit_count() == 8


def test_single_pixel_second_enhancement_uses_lit_border():
    image, enhancer = parse_image(ALTERNATING + "\n\n#")
    last = image.enhance(enhancer).enhance(enhancer)
    assert last.infinite_pixel == "."
    assert last.next_infinite_pixel == "#"
    assert str(last).split("\n")[0] == "#...."


def test_parse_rejects_missing_image():
    with pytest.raises(ValueError):
        parse_image(ALTERNATING)


def test_parse_rejects_short_enhancer():
    with pytest.raises(ValueError):
        parse_image("#.#\n\n#..\n...")


def test_parse_rejects_ragged_image():
    with pytest.raises(ValueError):
        parse_image(ALTERNATING + "\n\n#..\n.")


def test_image_str_marks_lit_pixels():
    image = Image(((True, False), (False, True)))
    assert str(image) == "#.\n.#\n"
    assert image.lit_count() == 2


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert "Part One: 35 " in out
    assert "Part Two: 3351 " in out