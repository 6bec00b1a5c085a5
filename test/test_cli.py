# test/test_cli.py
import json

from badlogvis.cli import build_parser, main


def write_dump(path, topics, rows):
    header = json.dumps({"topics": topics, "values": []})
    names = ",".join(t["name"] for t in topics)
    body = "\n".join(",".join(r) for r in rows)
    path.write_text(f"{header}\n{names}\n{body}\n", encoding="utf-8")
    return path


def test_parser_flags():
    args = build_parser().parse_args(["in.bag", "out.html", "-t", "-c", "-o"])
    assert args.input == "in.bag"
    assert args.output == "out.html"
    assert args.trim_doubles and args.csv and args.open_in_browser


def test_main_writes_default_output(tmp_path):
    src = write_dump(tmp_path / "run.bag", [{"name": "a/b", "unit": "m", "attrs": []}], [("1",), ("2",)])
    assert main([str(src)]) == 0

    out = tmp_path / "run.bag.html"
    assert out.exists()
    assert "BadLog" in out.read_text(encoding="utf-8")


def test_main_explicit_output_csv_mode(tmp_path):
    src = tmp_path / "plain.csv"
    src.write_text("x,y\n1,2\n", encoding="utf-8")
    out = tmp_path / "report.html"
    assert main([str(src), str(out), "--csv"]) == 0
    assert out.exists()


def test_main_fatal_error_returns_1(tmp_path, caplog):
    src = write_dump(
        tmp_path / "bad.bag",
        [{"name": "a", "unit": "", "attrs": ["xaxis"]}, {"name": "b", "unit": "", "attrs": ["xaxis"]}],
        [("1", "2")],
    )
    assert main([str(src)]) == 1
    assert "Multiple topics with xaxis attribute" in caplog.text
    assert not (tmp_path / "bad.bag.html").exists()


def test_main_non_utf8_input_returns_1(tmp_path, caplog):
    src = tmp_path / "binary.csv"
    src.write_bytes(b"a\n\xff\n")
    assert main([str(src), "--csv"]) == 1
    assert "Failed to open file" in caplog.text
