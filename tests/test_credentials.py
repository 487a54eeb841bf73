from jira_score.core.credentials import CredentialStore


def test_save_and_clear():
    store = CredentialStore()
    assert not store.is_configured()
    store.save("https://x.net", "a@x.net", "tok")
    assert store.is_configured()
    assert store.get().jira_email == "a@x.net"
    store.clear()
    assert not store.is_configured()


def test_load_from_env_aliases():
    store = CredentialStore()
    env = {"JIRA_SERVER": "https://x.net", "JIRA_EMAIL": "a@x.net", "JIRA_TOKEN": "tok"}
    assert store.load_from_env(env) is True
    assert store.get().jira_url == "https://x.net"
    assert store.get().jira_api_token == "tok"


def test_load_from_mapping_section():
    store = CredentialStore()
    secrets = {"jira": {"JIRA_URL": "https://x.net", "JIRA_EMAIL": "a@x.net", "JIRA_API_TOKEN": "tok"}}
    assert store.load_from_mapping(secrets) is True
    assert store.is_configured()


def test_incomplete_source_keeps_existing():
    store = CredentialStore()
    store.save("https://x.net", "a@x.net", "tok")
    assert store.load_from_env({"JIRA_URL": "https://y.net"}) is False
    assert store.get().jira_url == "https://x.net"
