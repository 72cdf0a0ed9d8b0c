from arnguard.conditions import COMMON_KEYS, ConditionKey, StaticKeyRegistry, substitute


def test_condition_key_names() -> None:
    key = ConditionKey("aws:username")
    assert key.var_name == "${aws:username}"
    assert key.short_name == "username"
    assert ConditionKey("custom").short_name == "custom"


def test_common_keys() -> None:
    names = [key.name for key in COMMON_KEYS.keys()]
    assert "aws:username" in names
    assert "jwt:preferred_username" in names
    assert len(names) == len(set(names))


def test_substitute() -> None:
    pattern = "home/${aws:username}/${jwt:sub}/*"
    assert substitute(pattern, {"aws:username": ["alice"], "sub": ["42"]}) == "home/alice/42/*"
    assert substitute(pattern, None) == pattern
    assert substitute(pattern, {"aws:username": [""]}) == pattern


def test_substitute_replaces_every_occurrence() -> None:
    assert substitute("${aws:userid}/${aws:userid}", {"aws:userid": ["u1"]}) == "u1/u1"


def test_extend_registry() -> None:
    registry = COMMON_KEYS.extend(["custom:team", "aws:username"])
    assert len(registry) == len(COMMON_KEYS) + 1
    assert substitute("t/${custom:team}", {"custom:team": ["red"]}, registry) == "t/red"
    assert substitute("t/${aws:username}", {"aws:username": ["a"]}, StaticKeyRegistry([])) == "t/${aws:username}"


def test_extend_registry_drops_repeated_names() -> None:
    registry = StaticKeyRegistry(["aws:username"]).extend(["c:x", "c:x", "c:y", "aws:username"])
    assert [key.name for key in registry.keys()] == ["aws:username", "c:x", "c:y"]
