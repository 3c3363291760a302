from __future__ import annotations

from PIL import Image

from imagen.cli import build_parser, build_request, main


class TestGenerateCommand:
    def test_single_image(self, tmp_path, capsys) -> None:
        target = tmp_path / "single-{w}x{h}.png"
        assert main(["generate", "-s", "40x30", "-c", "red", "-f", str(target)]) == 0

        written = tmp_path / "single-40x30.png"
        with Image.open(written) as image:
            assert image.size == (40, 30)
        assert f"Generated: {written} (40x30, solid)" in capsys.readouterr().out

    def test_numbered_output(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        argv = ["generate", "-s", "20x10", "-s", "10x20", "-g", "red,blue:45", "-n", "random,white:4", "--format", "jpeg", "-f", "shot.jpg", "-r", "2"]
        assert main(argv) == 0
        assert sorted(p.name for p in tmp_path.iterdir()) == [f"shot-{n:04d}.jpg" for n in range(1, 9)]
        with Image.open(tmp_path / "shot-0001.jpg") as image:
            assert image.format == "JPEG"

    def test_malformed_size_writes_nothing(self, tmp_path, capsys) -> None:
        code = main(["generate", "-s", "400", "-c", "red", "-f", str(tmp_path / "out.png")])
        assert code == 1
        assert list(tmp_path.iterdir()) == []
        assert "Error: invalid size" in capsys.readouterr().err

    def test_bad_color_is_reported(self, tmp_path, capsys) -> None:
        assert main(["generate", "-g", "red", "-f", str(tmp_path / "x.png")]) == 1
        assert "requires at least 2 colors" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []


class TestRequestBuilding:
    def test_background_flags_keep_order(self) -> None:
        args = build_parser().parse_args(["generate", "-t", "red,blue", "-c", "green", "--gradient", "red,blue:90"])
        request = build_request(args)
        assert [d.mode for d in request.backgrounds] == ["tiled", "solid", "gradient"]

    def test_defaults(self) -> None:
        request = build_request(build_parser().parse_args(["generate"]))
        assert request.sizes == ["256x192"]
        assert request.text == "{w}x{h}"
        assert request.filename == "image.png"
        assert request.rounds == 1
        assert request.border.width == 0

    def test_border_and_text_color(self) -> None:
        args = build_parser().parse_args(["generate", "-b", "3,black", "--text-color", "yellow", "--text-size", "14"])
        request = build_request(args)
        assert request.border.width == 3
        assert request.text_color.resolve() == (255, 255, 0, 255)
        assert request.text_size == 14
