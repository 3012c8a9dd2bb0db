import copy

from kubesail_config.merge import entry_name, merge, upsert_by_name
from kubesail_config.models import ConfigDocument
from kubesail_config.payload import validate


def _unrelated_document(current_context="minikube"):
    return ConfigDocument(
        current_context=current_context,
        clusters=[
            {"name": "minikube", "cluster": {"server": "https://192.168.49.2:8443"}},
            {"name": "prod", "cluster": {"server": "https://prod.example:6443"}},
        ],
        users=[{"name": "minikube", "user": {"client-key": "/tmp/k"}}],
        contexts=[
            {"name": "minikube", "context": {"cluster": "minikube", "user": "minikube"}},
            {"name": "prod", "context": {"cluster": "prod", "user": "minikube"}},
        ],
        preferences={"colors": True},
    )


def _named(entries, name):
    return [entry for entry in entries if entry["name"] == name]


def test_empty_document_gets_one_entry_per_list(alice):
    result = merge(ConfigDocument(), validate(alice))

    assert result.names("clusters") == ["kubesail-alice"]
    assert result.names("users") == ["kubesail-alice"]
    assert result.names("contexts") == ["kubesail-alice"]
    assert result.current_context == "kubesail-alice"

    assert result.clusters[0]["cluster"] == {
        "certificate-authority-data": "c1",
        "server": "https://a.example:6443",
    }
    assert result.users[0]["user"] == {"client-key-data": "c1", "token": "t1"}
    assert result.contexts[0]["context"] == {
        "cluster": "kubesail-alice",
        "namespace": "default",
        "user": "kubesail-alice",
    }


def test_reregistration_overwrites_in_place(alice):
    first = merge(ConfigDocument(), validate(alice))
    second = merge(first, validate(dict(alice, token="t2")))

    assert second.names("users") == ["kubesail-alice"]
    assert second.users[0]["user"]["token"] == "t2"
    assert len(second.clusters) == 1
    assert len(second.contexts) == 1
    assert second.current_context == "kubesail-alice"


def test_merge_is_idempotent(alice):
    payload = validate(alice)
    once = merge(_unrelated_document(), payload)
    twice = merge(once, payload)

    assert twice.to_dict() == once.to_dict()


def test_unrelated_entries_survive_in_order(alice):
    document = _unrelated_document()
    before = copy.deepcopy(document)

    result = merge(document, validate(alice))

    assert result.clusters[:2] == before.clusters
    assert result.users[:1] == before.users
    assert result.contexts[:2] == before.contexts
    assert result.preferences == {"colors": True}
    assert result.names("clusters") == ["minikube", "prod", "kubesail-alice"]


def test_replacement_keeps_position(alice):
    document = _unrelated_document()
    document.clusters.insert(1, {"name": "kubesail-alice", "cluster": {"server": "https://old"}})

    result = merge(document, validate(alice))

    assert result.names("clusters") == ["minikube", "kubesail-alice", "prod"]
    assert result.clusters[1]["cluster"]["server"] == "https://a.example:6443"


def test_merge_does_not_mutate_input(alice):
    document = _unrelated_document(current_context=None)
    before = copy.deepcopy(document)

    merge(document, validate(alice))

    assert document == before


def test_existing_current_context_is_kept(alice):
    result = merge(_unrelated_document(current_context="prod"), validate(alice))
    assert result.current_context == "prod"


def test_unset_current_context_is_claimed(alice):
    result = merge(_unrelated_document(current_context=None), validate(alice))
    assert result.current_context == "kubesail-alice"


def test_second_user_does_not_switch_context(alice):
    first = merge(ConfigDocument(), validate(alice))
    second = merge(first, validate(dict(alice, username="bob")))

    assert second.current_context == "kubesail-alice"
    assert second.names("contexts") == ["kubesail-alice", "kubesail-bob"]


def test_context_references_its_cluster_and_user(alice):
    result = merge(_unrelated_document(), validate(dict(alice, username="carol")))
    name = entry_name("carol")

    context = result.find_context(name)
    assert context.cluster == name
    assert context.user == name
    assert len(_named(result.clusters, name)) == 1
    assert len(_named(result.users, name)) == 1


def test_username_is_used_verbatim(alice):
    result = merge(ConfigDocument(), validate(dict(alice, username="a: b")))
    assert result.names("contexts") == ["kubesail-a: b"]


def test_upsert_by_name_replaces_first_match_only():
    entries = [{"name": "a", "v": 1}, {"name": "b"}, {"name": "a", "v": 2}]

    assert upsert_by_name(entries, {"name": "a", "v": 3}) is True
    assert entries == [{"name": "a", "v": 3}, {"name": "b"}, {"name": "a", "v": 2}]

    assert upsert_by_name(entries, {"name": "c"}) is False
    assert entries[-1] == {"name": "c"}
