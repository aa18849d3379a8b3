import pytest

from blockpic.cli import build_parser, main
from blockpic.renderer import LOWER_HALF_BLOCK


def test_defaults():
    args = build_parser().parse_args([])
    assert args.files == []
    assert args.width is None
    assert args.height is None
    assert not args.real_size
    assert not (args.triangle or args.nearest or args.lanczos)


def test_short_h_is_height():
    args = build_parser().parse_args(["-h", "12", "-w", "7", "a.png"])
    assert (args.width, args.height, args.files) == (7, 12, ["a.png"])


@pytest.mark.parametrize("value", ["abc", "-3", "1.5", "", "١٢"])
def test_malformed_size_exits(value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-w", value, "a.png"])
    assert excinfo.value.code != 0
    captured = capsys.readouterr()
    assert f"Malformed size: {value}" in captured.err
    assert captured.out == ""


def test_malformed_height_exits_before_rendering(write_png, capsys):
    path = write_png()
    with pytest.raises(SystemExit):
        main([str(path), "--height", "x"])
    assert capsys.readouterr().out == ""


def test_help_is_long_option_only(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--real-size" in capsys.readouterr().out


def test_renders_file(write_png, capsys):
    path = write_png(size=(8, 8))
    main(["-n", "-w", "4", "-h", "4", str(path)])
    lines = capsys.readouterr().out.split("\n")
    assert [line.count(LOWER_HALF_BLOCK) for line in lines] == [4, 4, 0]


def test_real_size_flag(write_png, capsys):
    path = write_png(size=(3, 3))
    main(["--real-size", "-l", str(path)])
    lines = capsys.readouterr().out.split("\n")
    assert [line.count(LOWER_HALF_BLOCK) for line in lines] == [3, 3, 0]


def test_batch_keeps_going(write_png, tmp_path, capsys):
    path = write_png(size=(2, 2))
    missing = tmp_path / "missing.png"
    main([str(missing), str(path)])
    captured = capsys.readouterr()
    assert captured.err == f"Could not open {missing}\n"
    assert captured.out.startswith(f"{missing}\n{path}\n")
