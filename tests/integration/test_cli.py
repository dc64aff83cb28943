# tests/integration/test_cli.py

import json

from kmpsearch.main import main, run_search
from kmpsearch.visualization import graphviz_renderer


def test_cli_text_json(capsys):
    main(["--pattern", "AA", "--text", "AAAA", "--json"])
    out = json.loads(capsys.readouterr().out)
    assert out["matches"] == [0, 1, 2]
    assert out["pattern"] == "AA"


def test_cli_text_report(capsys):
    matches = run_search("ABABCABAB", text="ABABDABACDABABCABAB")
    assert matches == [10]
    out = capsys.readouterr().out
    assert "Positions: [10]" in out


def test_cli_text_file_nocase(tmp_path, capsys):
    text_file = tmp_path / "input.txt"
    text_file.write_bytes(b"Fox fox FOX")

    assert run_search("fox", text_file=str(text_file)) == [4]
    assert run_search("fox", text_file=str(text_file), nocase=True) == [0, 4, 8]


def test_cli_pcap(tmp_path, capsys):
    from scapy.all import Ether, IP, TCP, wrpcap

    payload = b"GET /test UNION SELECT something"
    pkt = (
        Ether() /
        IP(src="10.0.0.1", dst="10.0.0.2") /
        TCP(sport=12345, dport=80, seq=1, flags="PA") /
        payload
    )
    pcap_path = tmp_path / "test.pcap"
    wrpcap(str(pcap_path), pkt)

    hits = run_search("union select", pcap=str(pcap_path), nocase=True)
    assert len(hits) == 1
    assert hits[0]["offsets"] == [10]
    assert "[MATCH] packet 0" in capsys.readouterr().out


def test_cli_exports_automaton(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(graphviz_renderer.shutil, "which", lambda name: None)
    dot_path = tmp_path / "kmp.dot"
    svg_path = tmp_path / "kmp.svg"

    main(["--pattern", "ABAB", "--text", "ABABAB", "--dot", str(dot_path), "--svg", str(svg_path)])

    assert 'digraph "KMP"' in dot_path.read_text(encoding="utf-8")
    assert "<svg" in svg_path.read_text(encoding="utf-8")


def test_demo_harness(capsys):
    from cli.run_demo import main as run_demo

    results = run_demo()
    assert results["Short String Test"] == [10]
    assert results["Medium String Test"] == [16 + 45 * k for k in range(50)]
    assert results["No Match Test"] == []
    assert len(results["Long String Test (DNA Sequence)"]) > 0
    assert "Complexity Analysis" in capsys.readouterr().out


def test_cli_nocase_offsets_and_display(capsys):
    assert run_search("x", text="İx", nocase=True) == [1]

    run_search("fox", text="The FOX", nocase=True)
    out = capsys.readouterr().out
    assert "Text: The FOX" in out
    assert 'Pattern: "fox"' in out
    assert "Text length: 7 characters" in out
