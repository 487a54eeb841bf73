from jira_score.core.column_config import get_columns, load_column_sets


def test_defaults_without_yaml(tmp_path):
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["ticket_list"][0] == "Ticket"
    assert "open_count" in sets["breakdown"]


def test_yaml_overrides(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets:\n  ticket_list: [Ticket, score]\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["ticket_list"] == ["Ticket", "score"]
    assert get_columns("ticket_list") == ["Ticket", "score"]
    assert get_columns("missing") == []
    load_column_sets(reload=True)


def test_invalid_yaml_falls_back(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets: [unclosed\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["ticket_list"][0] == "Ticket"
    load_column_sets(reload=True)
