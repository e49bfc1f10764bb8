import pytest

from raycfg.config import Config, ConfigError, load_config, parse_config
from raycfg.errors import RaytracerError

SCENE = """
# Camera settings
camera : {
    resolution = { width = 400; height = 300; };
    position = { x = 0; y = -100; z = 20; };
    fieldOfView = 72.0; // degrees
};
/* primitives
   over several lines */
primitives = (
    { type = "sphere"; x = 1.5; color = { r = 255; g = 64; b = 0; }; },
    { type = "plane", length = 2e1, width = .5 }
);
lights = {
    point = ( { x = 400.0; y = 100.0; z = 500.0; } );
    enabled = true;
};
"""


@pytest.fixture
def scene():
    return parse_config(SCENE)


def test_nested_group_values(scene):
    assert scene.lookup_value("camera.resolution.width", 0) == 400
    assert scene.lookup_value("camera.position.y", 0) == -100
    assert scene.lookup_value("camera.fieldOfView", 0.0) == 72.0
    assert scene.lookup_value("lights.enabled", False) is True


def test_list_index_paths(scene):
    assert scene.lookup_value("primitives.[0].type", "") == "sphere"
    assert scene.lookup_value("primitives[1].type", "") == "plane"
    assert scene.lookup_value("primitives.[0].color.g", 0) == 64
    assert scene.lookup_value("primitives.[1].length", 0.0) == 2e1
    assert scene.lookup_value("primitives.[1].width", 0.0) == 0.5
    assert scene.lookup_value("lights.point.[0].z", 0.0) == 500.0


def test_lookup_returns_structures(scene):
    primitives = scene.lookup("primitives")
    assert len(primitives) == 2
    assert scene.lookup("lights.point.[0]") == {"x": 400.0, "y": 100.0, "z": 500.0}
    assert scene.lookup("") is scene.root


def test_lookup_missing_raises(scene):
    with pytest.raises(ConfigError):
        scene.lookup("camera.missing")
    with pytest.raises(ConfigError):
        scene.lookup("primitives.[5]")
    with pytest.raises(ConfigError):
        scene.lookup("camera.[0]")


def test_config_error_is_raytracer_error(scene):
    with pytest.raises(RaytracerError):
        scene.lookup("nowhere")


def test_contains(scene):
    assert "camera.resolution" in scene
    assert "camera.nothing" not in scene


def test_lookup_value_missing_keeps_default(scene):
    assert scene.lookup_value("camera.missing", "keep") == "keep"
    assert scene.lookup_value("camera", 5) == 5


def test_lookup_value_types_must_match(scene):
    assert scene.lookup_value("camera.fieldOfView", 7) == 7
    assert scene.lookup_value("camera.resolution.width", 1.5) == 1.5
    assert scene.lookup_value("lights.enabled", 3) == 3
    assert scene.lookup_value("camera.resolution.width", "text") == "text"


def test_lookup_value_without_default_returns_any_scalar(scene):
    assert scene.lookup_value("primitives.[0].x") == 1.5
    assert scene.lookup_value("camera.resolution") is None


def test_strings_escapes_and_concatenation():
    config = parse_config('name = "a\\tb" "c";\nletter = "\\x41\\"";')
    assert config.lookup("name") == "a\tbc"
    assert config.lookup("letter") == 'A"'


def test_integer_forms():
    config = parse_config("h = 0x1F; big = 10L; neg = -7;")
    assert config.lookup("h") == 0x1F
    assert config.lookup("big") == 10
    assert config.lookup("neg") == -7


def test_float_forms():
    config = parse_config("a = -1.5e-3; b = 3.; c = 1E2;")
    assert config.lookup("a") == -1.5e-3
    assert config.lookup("b") == 3.0
    assert config.lookup("c") == 1e2


def test_booleans_case_insensitive_and_names_starting_with_true():
    config = parse_config("flag = TRUE; off = False; true_x = 1;")
    assert config.lookup("flag") is True
    assert config.lookup("off") is False
    assert config.lookup("true_x") == 1


def test_arrays_and_empty_list():
    config = parse_config("a = [1, 2, 3]; e = []; l = ();")
    assert config.lookup("a") == [1, 2, 3]
    assert config.lookup("a.[2]") == 3
    assert config.lookup("e") == []
    assert config.lookup("l") == []


def test_mixed_array_raises():
    with pytest.raises(ConfigError):
        parse_config("a = [1, 2.0];")


def test_array_of_groups_raises():
    with pytest.raises(ConfigError):
        parse_config("a = [ { x = 1; } ];")


def test_duplicate_setting_raises():
    with pytest.raises(ConfigError):
        parse_config("a = 1; a = 2;")


def test_syntax_error_reports_line():
    with pytest.raises(ConfigError) as excinfo:
        parse_config("a = 1;\nb = ;\n")
    assert excinfo.value.line == 2


def test_unterminated_group_raises():
    with pytest.raises(ConfigError):
        parse_config("camera = { width = 1;")


def test_unknown_character_raises():
    with pytest.raises(ConfigError):
        parse_config('@include "other.cfg"')


def test_empty_config():
    config = parse_config("  # nothing here\n")
    assert config.root == {}
    assert Config().root == {}


def test_load_config_from_file(tmp_path):
    path = tmp_path / "scene.cfg"
    path.write_text(SCENE, encoding="utf-8")
    config = load_config(path)
    assert config.filename == str(path)
    assert config.lookup_value("camera.resolution.height", 0) == 300


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path / "absent.cfg")
    assert str(excinfo.value) == "I/O error while reading file."


def test_load_config_empty_path():
    with pytest.raises(ConfigError) as excinfo:
        load_config("")
    assert str(excinfo.value) == "No file to open"


def test_load_config_parse_error_names_file(tmp_path):
    path = tmp_path / "broken.cfg"
    path.write_text("a = 1;\nb = {\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(path)
    assert str(excinfo.value).startswith(f"Parse error at {path}:")
    assert excinfo.value.filename == str(path)