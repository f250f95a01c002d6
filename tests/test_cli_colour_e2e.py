import json

from treeweave.cli import main

TREE = {
    "label": "root",
    "footprint": [0, 0, 100, 50],
    "children": [
        {"label": "a", "footprint": [0, 0, 50, 50], "children": [
            {"label": "a1", "footprint": [0, 0, 50, 25]},
            {"label": "a2", "footprint": [0, 25, 50, 25]},
        ]},
        {"label": "b", "footprint": [50, 0, 50, 50]},
    ],
}


def _write_tree(tmp_path):
    p = tmp_path / "tree.json"
    p.write_text(json.dumps(TREE))
    return p


def test_cli_colour_writes_records(tmp_path, capsys):
    tree = _write_tree(tmp_path)
    out = tmp_path / "out" / "nodes.json"
    rc = main([
        "colour", "--tree", str(tree), "--config", str(tmp_path / "none.yaml"),
        "--seed", "3", "--mutation", "0.5", "--out", str(out), "--print",
    ])
    assert rc == 0
    recs = json.loads(out.read_text())
    printed = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert printed == recs
    assert [r["label"] for r in recs] == ["root", "a", "a1", "a2", "b"]
    assert recs[0]["colour"] is None
    assert all(r["colour"].startswith("#") and len(r["colour"]) == 7 for r in recs[1:])


def test_cli_is_reproducible_with_seed(tmp_path):
    tree = _write_tree(tmp_path)
    outs = []
    for i in range(2):
        out = tmp_path / f"n{i}.json"
        main(["colour", "--tree", str(tree), "--config", str(tmp_path / "none.yaml"),
              "--seed", "11", "--out", str(out)])
        outs.append(json.loads(out.read_text()))
    assert outs[0] == outs[1]


def test_cli_renders_png(tmp_path, monkeypatch):
    monkeypatch.setenv("MPLBACKEND", "Agg")
    tree = _write_tree(tmp_path)
    png = tmp_path / "map.png"
    main(["colour", "--tree", str(tree), "--config", str(tmp_path / "none.yaml"),
          "--out", str(tmp_path / "n.json"), "--png", str(png)])
    assert png.exists() and png.stat().st_size > 0


def test_cli_rejects_bad_mutation(tmp_path):
    import pytest
    tree = _write_tree(tmp_path)
    with pytest.raises(SystemExit):
        main(["colour", "--tree", str(tree), "--config", str(tmp_path / "none.yaml"),
              "--mutation", "2.0", "--out", str(tmp_path / "n.json")])


def test_cli_honours_json_log_format(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("TREEWEAVE_LOG_FORMAT", raising=False)
    monkeypatch.delenv("TREEWEAVE_LOG_LEVEL", raising=False)
    cfg = tmp_path / "treemap.yaml"
    cfg.write_text("logging: {level: info, format: json}\n")
    tree = _write_tree(tmp_path)
    try:
        main(["colour", "--tree", str(tree), "--config", str(cfg), "--out", str(tmp_path / "n.json")])
        lines = [l for l in capsys.readouterr().err.splitlines() if l.startswith("{")]
        recs = [json.loads(l) for l in lines]
        assert any(r["name"] == "treeweave.tree" and "built 5 nodes" in r["msg"] for r in recs)
    finally:
        from treeweave.logging import init_logging
        init_logging("none")
