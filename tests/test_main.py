import json

import pytest

from wordladder.main import main


def test_single_query(word_file, capsys):
    assert main([str(word_file), "cat", "dog"]) == 0
    assert capsys.readouterr().out.splitlines() == ["cat cot cog dog"]


def test_batch_with_failures(word_file, capsys):
    assert main([str(word_file), "hit", "cog", "cat", "dog", "foo", "bar"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "hit not found in dictionary.",
        "cat cot cog dog",
        "foo and bar not found in dictionary.",
    ]


def test_no_possible_path(tmp_path, capsys):
    path = tmp_path / "split.txt"
    path.write_text("cat\ncot\ndog\ndig\n")
    assert main([str(path), "cat", "dog"]) == 0
    assert capsys.readouterr().out.strip() == "NO POSSIBLE PATH: cat to dog"


def test_odd_argument_count(word_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(word_file), "cat"])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "Incorrect number of arguments" in captured.err
    assert captured.out == ""


def test_missing_word_list(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "cat", "dog"]) == 1
    assert "[!] Error: failed to open word list" in capsys.readouterr().out


def test_verbose_progress(word_file, capsys):
    main([str(word_file), "cat", "dog", "-v"])
    out = capsys.readouterr().out
    assert "[*] Graph generation started..." in out
    assert out.strip().endswith("cat cot cog dog")


def test_verbose_reports_missing_word_list_once(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "cat", "dog", "-v"]) == 1
    out = capsys.readouterr().out
    assert out.count("[!]") == 1
    assert "[!] Error: failed to open word list" in out


def test_debug_reports_loading(word_file, capsys):
    assert main([str(word_file), "cat", "dog", "--debug"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "[*] Loading words.txt..." in out
    assert "[+] Loaded 5 words from words.txt" in out
    assert "[*] Graph generation started..." in out
    assert out[-1] == "cat cot cog dog"


def test_verbose_alone_skips_loader_lines(word_file, capsys):
    main([str(word_file), "cat", "dog", "-v"])
    assert "[*] Loading words.txt..." not in capsys.readouterr().out


def test_max_length_option(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncats\n")
    main([str(path), "cat", "cats", "--max-length", "3"])
    assert capsys.readouterr().out.strip() == "cats not found in dictionary."


def test_json_report(word_file, tmp_path, capsys):
    out_dir = tmp_path / "out"
    assert main([str(word_file), "cat", "dog", "--json", "-o", str(out_dir)]) == 0
    reports = list(out_dir.glob("wordladder_report_*.json"))
    assert len(reports) == 1
    assert json.loads(reports[0].read_text())["found"] == 1
    assert "[+] JSON report:" in capsys.readouterr().out


def test_config_file(word_file, tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"search": {"max_expansions": 1}}))
    main([str(word_file), "cat", "dog", "--config", str(config_path)])
    assert capsys.readouterr().out.startswith("SEARCH ABORTED: cat to dog")


def test_cli_overrides_config_file(word_file, tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"search": {"max_expansions": 1}}))
    main([str(word_file), "cat", "dog", "--config", str(config_path), "--max-expansions", "10"])
    assert capsys.readouterr().out.strip() == "cat cot cog dog"


def test_invalid_config_option(word_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(word_file), "cat", "dog", "--max-expansions", "0"])
    assert excinfo.value.code == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_dump_graph(word_file, capsys):
    main([str(word_file), "--dump-graph"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "# length 3: 5 words"
    assert "cat: cot" in out


def test_reopen_option(tmp_path, capsys):
    path = tmp_path / "detour.txt"
    path.write_text("bb\nab\nbab\naa\nbaa\nbaaa\naaaa\n")
    main([str(path), "bb", "aaaa"])
    assert capsys.readouterr().out.strip() == "bb ab aa baa baaa aaaa"
    main([str(path), "bb", "aaaa", "--reopen"])
    assert capsys.readouterr().out.strip() == "bb bab baa baaa aaaa"


def test_help_explains_reopen(capsys):
    with pytest.raises(SystemExit):
        main(["--help"])
    assert "longer than the shortest one" in " ".join(capsys.readouterr().out.split())
