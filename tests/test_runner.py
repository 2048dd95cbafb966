import pandas as pd
import pytest

from package_mst.builder import MstBuilderConfig
from package_mst.lookup import LookupStatus
from package_mst.runner import GraphFormatError, format_mst, load_graph, run_file, save_mst

_SCENARIO = "4 4\n0 1 10 A\n1 2 5 B\n2 3 1 C\n0 3 8 D\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _quiet():
    return MstBuilderConfig(seed=0, verbose=False)


def test_load_text_graph(tmp_path):
    graph = load_graph(_write(tmp_path, "graph_data.txt", _SCENARIO))
    assert graph.vertex_count == 4
    assert graph.edge_count == 4
    assert graph.edges[2].source == 2
    assert graph.edges[2].package_code == "C"
    assert graph.package_codes() == {"A", "B", "C", "D"}


def test_load_text_graph_keeps_declared_edge_count(tmp_path):
    graph = load_graph(_write(tmp_path, "g.txt", "3 1\n0 1 2 A\n1 2 3 B\n"))
    assert [edge.package_code for edge in graph.edges] == ["A"]
    assert graph.extra_codes == {"B"}
    assert graph.package_codes() == {"A", "B"}


def test_load_text_graph_reads_a_token_stream(tmp_path):
    graph = load_graph(_write(tmp_path, "g.txt", "4\n4\n0 1 10 A 1 2\n5 B\n2 3 1 C\n0\t3 8 D"))
    assert graph.vertex_count == 4
    assert [edge.package_code for edge in graph.edges] == ["A", "B", "C", "D"]
    assert graph.edges[1].weight == 5


def test_codes_past_declared_edges_are_known(tmp_path, capsys):
    path = _write(tmp_path, "g.txt", "2 1\n0 1 3 A\n0 1 9 Q\n")
    result, outcome = run_file(path, query="Q", config=_quiet())
    assert [edge.package_code for edge in result.edges] == ["A"]
    assert outcome.status is LookupStatus.NOT_IN_MST
    assert "Package code Q found but not located in the MST." in capsys.readouterr().out


@pytest.mark.parametrize("code", ["NA", "null", "nan", "None", "N/A"])
def test_text_graph_accepts_missing_value_lookalikes(tmp_path, code):
    graph = load_graph(_write(tmp_path, "g.txt", f"3 2\n0 1 4 {code}\n1 2 3 B\n"))
    assert graph.edges[0].package_code == code


@pytest.mark.parametrize("code", ["NA", "null", "nan", "None", "N/A"])
def test_csv_graph_accepts_missing_value_lookalikes(tmp_path, code):
    text = f"source,destination,weight,package_code\n0,1,4,{code}\n1,2,3,B\n"
    result, outcome = run_file(_write(tmp_path, "g.csv", text), query=code, config=_quiet())
    assert result.edges[1].package_code == code
    assert outcome.status is LookupStatus.IN_MST


def test_csv_blank_code_rejected(tmp_path):
    text = "source,destination,weight,package_code\n0,1,4,\n"
    with pytest.raises(GraphFormatError):
        load_graph(_write(tmp_path, "bad.csv", text))


def test_csv_vertex_count_override(tmp_path):
    text = "source,destination,weight,package_code\n0,1,4,A\n"
    graph = load_graph(_write(tmp_path, "g.csv", text), vertex_count=5)
    assert graph.vertex_count == 5


def test_run_file_normalizes_query(tmp_path):
    _, outcome = run_file(_write(tmp_path, "g.txt", _SCENARIO), query="  D\n", config=_quiet())
    assert outcome.status is LookupStatus.IN_MST
    assert outcome.code == "D"


def test_load_text_graph_without_edges(tmp_path):
    graph = load_graph(_write(tmp_path, "g.txt", "3 0\n"))
    assert graph.vertex_count == 3
    assert graph.edges == []


def test_load_csv_graph_infers_vertex_count(tmp_path):
    text = "source,destination,weight,package_code\n0,1,4,A01\n1,5,2,007\n"
    graph = load_graph(_write(tmp_path, "g.csv", text))
    assert graph.vertex_count == 6
    assert graph.edges[1].package_code == "007"
    assert graph.edges[1].weight == 2


@pytest.mark.parametrize(
    "text",
    [
        "4\n0 1 1 A\n",
        "four 1\n0 1 1 A\n",
        "3 2\n0 1 1 A\n",
        "3 1\n0 1 heavy A\n",
        "3 1\n0 1 1.5 A\n",
        "3 1\n0 7 1 A\n",
    ],
)
def test_malformed_text_graph(tmp_path, text):
    with pytest.raises(GraphFormatError):
        load_graph(_write(tmp_path, "bad.txt", text))


def test_csv_missing_column(tmp_path):
    with pytest.raises(GraphFormatError):
        load_graph(_write(tmp_path, "bad.csv", "source,destination,weight\n0,1,2\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "absent.txt")


def test_format_mst(tmp_path):
    result, _ = run_file(_write(tmp_path, "g.txt", _SCENARIO), config=_quiet())
    assert format_mst(result) == (
        "The edges in the constructed MST are:\n"
        "2 - 3 (Weight: 1, Package: C)\n"
        "1 - 2 (Weight: 5, Package: B)\n"
        "0 - 3 (Weight: 8, Package: D)\n"
        "Total weight of MST: 14"
    )


def test_run_file_prints_mst_and_lookup(tmp_path, capsys):
    result, outcome = run_file(_write(tmp_path, "g.txt", _SCENARIO), query="A", config=_quiet())
    out = capsys.readouterr().out
    assert "Total weight of MST: 14" in out
    assert "Package code A found but not located in the MST." in out
    assert outcome.status is LookupStatus.NOT_IN_MST
    assert result.total_weight == 14


def test_run_file_reports_missing_input(tmp_path, capsys):
    assert run_file(tmp_path / "absent.txt", config=_quiet()) is None
    assert capsys.readouterr().out.startswith("ERROR: Input file not found")


def test_run_file_reports_malformed_input(tmp_path, capsys):
    assert run_file(_write(tmp_path, "bad.txt", "oops\n"), config=_quiet()) is None
    assert "ERROR: Could not read graph" in capsys.readouterr().out


def test_save_mst_csv(tmp_path):
    result, _ = run_file(_write(tmp_path, "g.txt", _SCENARIO), config=_quiet())
    output = tmp_path / "mst.csv"
    save_mst(result, output)
    saved = pd.read_csv(output, dtype={"package_code": str})
    assert saved["package_code"].tolist() == ["C", "B", "D"]
    assert saved["weight"].sum() == 14


def test_save_mst_rejects_unknown_suffix(tmp_path):
    result, _ = run_file(_write(tmp_path, "g.txt", _SCENARIO), config=_quiet())
    with pytest.raises(ValueError):
        save_mst(result, tmp_path / "mst.json")
