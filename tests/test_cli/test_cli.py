"""Tests for the mergesvg command line."""

from __future__ import annotations

import logging

from tests.conftest import CIRCLE_SVG, b64

from mergesvg.cache import RemoteCache
from mergesvg.cli import EXIT_FATAL, EXIT_OK, main


def test_merge_writes_output(write_layout, tmp_path, capsys):
    layout = write_layout({"canvas": {"width": 300, "height": 50}, "elements": [{"content": CIRCLE_SVG}]})
    out = tmp_path / "build" / "merged.svg"

    code = main(["merge", "--layout", str(layout), "--out", str(out), "--cache-dir", str(tmp_path / "c")])

    assert code == EXIT_OK
    assert out.read_text(encoding="utf-8").startswith("<?xml")
    assert "Merged SVG written to" in capsys.readouterr().out


def test_merge_reports_output_path_once(write_layout, tmp_path, capsys, caplog):
    layout = write_layout({"elements": [{"content": CIRCLE_SVG}]})
    out = tmp_path / "merged.svg"
    with caplog.at_level(logging.DEBUG):
        main(["merge", "--layout", str(layout), "--out", str(out), "--cache-dir", str(tmp_path / "c")])
    reported = capsys.readouterr().out + caplog.text
    assert reported.count("Merged SVG written to") == 1


def test_merge_with_skipped_elements_still_succeeds(write_layout, tmp_path):
    layout = write_layout({"elements": [{"name": "nothing"}, {"content": "<p>no</p>"}]})
    out = tmp_path / "merged.svg"
    assert main(["merge", "--layout", str(layout), "--out", str(out), "--cache-dir", str(tmp_path)]) == EXIT_OK
    assert out.exists()


def test_merge_base_dir(write_layout, tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "circle.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    layout = write_layout({"elements": [{"localPath": "circle.svg"}]})
    out = tmp_path / "merged.svg"

    code = main([
        "merge", "--layout", str(layout), "--out", str(out),
        "--cache-dir", str(tmp_path / "c"), "--base-dir", str(assets),
    ])

    assert code == EXIT_OK
    assert '<circle cx="12"' in out.read_text(encoding="utf-8")


def test_missing_layout_exits_fatal(tmp_path, capsys):
    code = main(["merge", "--layout", str(tmp_path / "nope.json"), "--out", str(tmp_path / "o.svg")])
    assert code == EXIT_FATAL
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "o.svg").exists()


def test_invalid_layout_exits_fatal(tmp_path):
    layout = tmp_path / "layout.json"
    layout.write_text("[oops", encoding="utf-8")
    assert main(["merge", "--layout", str(layout), "--out", str(tmp_path / "o.svg")]) == EXIT_FATAL


def test_prefetch_data_uri(write_layout, tmp_path, capsys):
    ref = "data:image/svg+xml;base64," + b64(CIRCLE_SVG)
    layout = write_layout({"elements": [{"remoteUrl": ref}, {"content": CIRCLE_SVG}]})
    outdir = tmp_path / "remotes"

    code = main(["prefetch", "--layout", str(layout), "--outdir", str(outdir)])

    assert code == EXIT_OK
    assert RemoteCache(outdir).get(ref) == CIRCLE_SVG
    assert "Done. Fetched 1 remote SVG(s) to" in capsys.readouterr().out


def test_prefetch_missing_layout(tmp_path):
    assert main(["prefetch", "--layout", str(tmp_path / "nope.json")]) == EXIT_FATAL
