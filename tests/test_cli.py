import math

import pytest

from coursegen.cli import build_parser, main
from coursegen.fusion import FusionPathCreator
from coursegen.mix_quarter import MixQuarterPathCreator
from coursegen.quarter import QuarterPathCreator
from coursegen.simple import SimplePathCreator


def _parse_points(text):
    points = []
    for line in text.splitlines():
        x, y = line.split(",")
        points.append((float(x), float(y)))
    return points


def _same_points(got, expected):
    assert len(got) == len(expected)
    for (gx, gy), (ex, ey) in zip(got, expected):
        assert gx == ex or (math.isnan(gx) and math.isnan(ex))
        assert gy == ey or (math.isnan(gy) and math.isnan(ey))


def test_parser_defaults_for_simple():
    args = build_parser().parse_args(["simple"])
    assert args.radius == 5.0
    assert args.course_length == 30.0
    assert args.resolution == 0.1
    assert args.hz == 10


def test_parser_defaults_for_fusion():
    args = build_parser().parse_args(["fusion", "--all-radius", "1", "2"])
    assert args.all_radius == [1.0, 2.0]
    assert args.max_course_length == 50.0


def test_fusion_requires_radii():
    with pytest.raises(SystemExit) as info:
        main(["fusion"])
    assert info.value.code == 2


def test_command_required():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_simple_output_matches_creator(capsys):
    assert main(["simple", "--radius", "2", "--course-length", "6"]) == 0
    out, err = capsys.readouterr()
    expected = SimplePathCreator(radius=2.0, course_length=6.0).create_course()
    _same_points(_parse_points(out), expected.points())
    assert "Create path finish!" in err


def test_quarter_output_matches_creator(capsys):
    argv = ["quarter", "--radius", "3", "--course-length", "8", "--init-theta", "0.5"]
    assert main(argv) == 0
    out, _ = capsys.readouterr()
    expected = QuarterPathCreator(
        radius=3.0, course_length=8.0, init_theta=0.5
    ).create_course()
    _same_points(_parse_points(out), expected.points())


def test_fusion_reports_length(capsys):
    assert main(["fusion", "--all-radius", "1", "2", "--init-x", "1"]) == 0
    out, err = capsys.readouterr()
    creator = FusionPathCreator(all_radius=[1.0, 2.0], init_x=1.0)
    expected = creator.create_course()
    _same_points(_parse_points(out), expected.points())
    assert "----- Create path finish! -----" in err
    assert f"Path length is {creator.course_length:g} [m]" in err


def test_mix_quarter_output_matches_creator(capsys):
    assert main(["mix-quarter", "--all-radius", "2", "0", "2"]) == 0
    out, err = capsys.readouterr()
    creator = MixQuarterPathCreator(all_radius=[2.0, 0.0, 2.0])
    expected = creator.create_course()
    _same_points(_parse_points(out), expected.points())
    assert "Path length is" in err


def test_output_file(tmp_path, capsys):
    target = tmp_path / "course.csv"
    assert main(["simple", "--course-length", "3", "-o", str(target)]) == 0
    out, _ = capsys.readouterr()
    assert out == ""
    expected = SimplePathCreator(course_length=3.0).create_course()
    _same_points(_parse_points(target.read_text(encoding="utf-8")), expected.points())


@pytest.mark.parametrize(
    "argv",
    [
        ["simple", "--resolution", "0"],
        ["simple", "--radius", "-1"],
        ["fusion", "--all-radius", "0"],
        ["mix-quarter", "--all-radius", "1", "--resolution", "-0.1"],
    ],
)
def test_invalid_values_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2