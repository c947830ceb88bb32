import json

import pytest

from wordladder.config import LadderConfig, OutputConfig, SearchConfig
from wordladder.exceptions import LadderArgumentError
from wordladder.model.schemas import QueryStatus
from wordladder.reporting.report_builder import generate_text_report
from wordladder.runner import load_graph, parse_word_pairs, run_queries


class TestParseWordPairs:
    def test_pairs(self):
        assert parse_word_pairs(["cat", "dog", "hit", "cog"]) == [("cat", "dog"), ("hit", "cog")]

    def test_no_words(self):
        assert parse_word_pairs([]) == []

    def test_odd_count(self):
        with pytest.raises(LadderArgumentError) as excinfo:
            parse_word_pairs(["cat", "dog", "hit"])
        assert excinfo.value.word_count == 3
        assert "Incorrect number of arguments" in str(excinfo.value)


def test_run_queries(word_file):
    lines = []
    batch = run_queries(str(word_file), ["cat", "dog", "hit", "cog", "CAT", "cot"],
                        output_callback=lines.append)

    assert lines == [
        "cat cot cog dog",
        "hit not found in dictionary.",
        "cat cot",
    ]
    assert batch.total_queries == 3
    assert batch.found_count == 2
    assert batch.not_found_count == 1
    assert batch.graph_stats.total_words == 5
    assert batch.report_path is None


def test_odd_words_fail_before_loading(tmp_path):
    # The word list does not exist; the argument error must win
    with pytest.raises(LadderArgumentError):
        run_queries(str(tmp_path / "missing.txt"), ["cat"])


def test_missing_word_list(tmp_path):
    messages = []
    with pytest.raises(FileNotFoundError):
        run_queries(str(tmp_path / "missing.txt"), ["cat", "dog"],
                    progress_callback=messages.append)
    assert not any(m.startswith("[!]") for m in messages)


def test_progress_messages(word_file):
    messages = []
    run_queries(str(word_file), ["cat", "dog"], progress_callback=messages.append)
    assert "[*] Graph generation started..." in messages
    assert "[+] Graph built: 5 words, 5 edges" in messages
    assert "[*] Searching cat -> dog..." in messages


def test_dump_graph(word_file):
    lines = []
    config = LadderConfig(output=OutputConfig(dump_graph=True))
    run_queries(str(word_file), [], config=config, output_callback=lines.append)
    assert lines[0] == "# length 3: 5 words"
    assert "dog: cog dot" in lines


def test_budget_from_config(word_file):
    config = LadderConfig(search=SearchConfig(max_expansions=1))
    batch = run_queries(str(word_file), ["cat", "dog"], config=config)
    assert batch.results[0].status == QueryStatus.BUDGET_EXCEEDED


def test_json_report(word_file, tmp_path):
    out_dir = tmp_path / "reports"
    config = LadderConfig(output=OutputConfig(output_dir=str(out_dir), json_report=True))
    batch = run_queries(str(word_file), ["cat", "dog", "cat", "cut"], config=config)

    assert batch.report_path is not None
    with open(batch.report_path) as f:
        report = json.load(f)
    assert report["total_queries"] == 2
    assert report["found"] == 1
    assert report["results"][0]["path"]["words"] == ["cat", "cot", "cog", "dog"]
    assert report["results"][1]["missing"] == ["cut"]
    assert report["graph_stats"]["total_edges"] == 5


def test_load_graph_merges_lists(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("cat\ncot\n")
    second.write_text("cog\ndog\n")
    graph = load_graph([str(first), str(second)])
    assert graph.node_count == 4
    assert graph.has_path("cat", "dog")


def test_text_report(word_file):
    batch = run_queries(str(word_file), ["cat", "dog", "cat", "cut"])
    report = generate_text_report(batch)
    assert "Queries: 2" in report
    assert "  - Found: 1" in report
    assert "#1 cat -> dog [Found]" in report
    assert "cut not found in dictionary." in report
