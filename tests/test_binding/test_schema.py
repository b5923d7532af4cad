from pathlib import Path

import pytest

from paramparse import BindingConfigurationError, FieldKind, ValueType, load_schema

YAML_SCHEMA = """\
option_parsing: true
bindings:
  - field: path
    required: true
  - field: device
  - field: timeout
    position: 0
    required: true
    type: int
  - field: forced
    kind: Option
    name: -g
"""

TOML_SCHEMA = """\
option_parsing = false

[[bindings]]
field = "name"
required = true

[[bindings]]
field = "age"
type = "long"
required = true
"""


class Settings:
    def __init__(self):
        self.path = None
        self.device = None
        self.timeout = None
        self.forced = None


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml_schema(tmp_path):
    schema = load_schema(write(tmp_path, "bindings.yaml", YAML_SCHEMA))
    assert schema.option_parsing is True

    bindings = schema.to_bindings()
    assert [binding.field for binding in bindings] == [
        "path",
        "device",
        "timeout",
        "forced",
    ]
    assert bindings[0].name == "path"
    assert bindings[2].value_type is ValueType.INT
    assert bindings[2].position == 0
    assert bindings[3].kind is FieldKind.OPTION
    assert bindings[3].name == "-g"


def test_yaml_schema_binds(tmp_path):
    schema = load_schema(str(write(tmp_path, "bindings.yml", YAML_SCHEMA)))
    parser = schema.parser()
    parser.parse(["--path=X", "-device=C:", "-g", "--timeout=45"])
    settings = parser.bind(Settings(), schema.to_bindings())
    assert settings.path == "X"
    assert settings.device == "C:"
    assert settings.timeout == 45
    assert settings.forced is True


def test_load_toml_schema(tmp_path):
    schema = load_schema(write(tmp_path, "bindings.toml", TOML_SCHEMA))
    parser = schema.parser()
    assert parser.option_parsing_enabled is False

    parser.parse(["--name", "Dieter", "-age", "38"])

    class Person:
        name = None
        age = None

    person = parser.bind(Person(), schema.to_bindings())
    assert person.name == "Dieter"
    assert person.age == 38


def test_missing_schema_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_schema(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError) as excinfo:
        load_schema(write(tmp_path, "bindings.json", "{}"))
    assert "Unsupported schema format" in str(excinfo.value)


def test_schema_must_be_a_dictionary(tmp_path):
    with pytest.raises(ValueError):
        load_schema(write(tmp_path, "bindings.yaml", "- field: path\n"))


def test_schema_path_type():
    with pytest.raises(TypeError):
        load_schema(42)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "entry",
    [
        "  - field: path\n    type: complex\n",
        "  - field: path\n    kind: flag\n",
        "  - name: path\n",
    ],
)
def test_invalid_binding_entry(tmp_path, entry):
    content = "bindings:\n" + entry
    with pytest.raises(BindingConfigurationError):
        load_schema(write(tmp_path, "bindings.yaml", content))


def test_option_entry_needs_name(tmp_path):
    content = "bindings:\n  - field: forced\n    kind: option\n"
    schema = load_schema(write(tmp_path, "bindings.yaml", content))
    with pytest.raises(BindingConfigurationError):
        schema.to_bindings()


def test_empty_bindings(tmp_path):
    schema = load_schema(write(tmp_path, "bindings.yaml", "option_parsing: false\n"))
    assert schema.to_bindings() == []
    assert schema.parser().option_parsing_enabled is False


def test_malformed_yaml(tmp_path):
    content = "bindings:\n  - field: [path\n"
    with pytest.raises(ValueError) as excinfo:
        load_schema(write(tmp_path, "bindings.yaml", content))
    assert "Invalid schema" in str(excinfo.value)
