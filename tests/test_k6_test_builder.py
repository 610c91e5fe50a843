"""Tests for K6TestBuilder script generation."""
import pytest
from pydantic import ValidationError

from k6builder import K6TestBuilder, Scenario, Step, status_check
from k6builder.utils.request_utils import k6_get, k6_post

HEADER = "import http from 'k6/http';\nimport { check, sleep } from 'k6';\n\n"


def _get_step(url="https://example.test/health", **kwargs):
    return Step(request=k6_get(url), **kwargs)


def test_default_imports_always_present():
    """The two seeded imports are rendered even with nothing configured."""
    script = K6TestBuilder().generate_script()
    assert script.startswith(HEADER)


def test_duplicate_imports_collapse():
    """Adding the same import twice renders it once, after the seeded ones."""
    extra = "import { Trend } from 'k6/metrics';"
    script = (
        K6TestBuilder()
        .add_imports(extra, "import http from 'k6/http';")
        .add_imports(extra)
        .generate_script()
    )
    assert script.count(extra) == 1
    assert script.count("import http from 'k6/http';") == 1
    assert script.startswith(HEADER.rstrip("\n") + "\n" + extra + "\n\n")


def test_zero_scenarios_throws():
    """An unconfigured test fails hard instead of running empty."""
    script = K6TestBuilder().generate_script()
    assert script == HEADER + 'export default function() {\n  throw new Error("No scenarios defined");\n}'


def test_single_scenario_end_to_end():
    """Options plus one GET step with a status check."""
    script = (
        K6TestBuilder()
        .set_options({"vus": 10, "duration": "30s"})
        .create_scenario("health", [_get_step(checks=[status_check(200)])])
        .generate_script()
    )
    assert script == (
        HEADER
        + 'export const options = {\n  "vus": 10,\n  "duration": "30s"\n};\n\n'
        + "export default function() {\n"
        + "  let res = http.get('https://example.test/health');\n"
        + "  check(res, {'status is 200': (r) => r.status === 200});\n"
        + "\n\n}"
    )
    assert script.count("export default function()") == 1


def test_single_scenario_omits_scenario_options():
    """Executor and extra keys of a lone scenario are not surfaced."""
    script = (
        K6TestBuilder()
        .add_scenario({"name": "only", "executor": "constant-vus", "vus": 5, "steps": [_get_step()]})
        .generate_script()
    )
    assert "constant-vus" not in script
    assert "export const options" not in script
    assert "export function only" not in script


def test_multiple_scenarios_render_options_block_in_order():
    """Each scenario gets an entry and a named function in insertion order."""
    script = (
        K6TestBuilder()
        .add_scenario({"name": "browse", "steps": [_get_step()], "rate": 10, "duration": "1m"})
        .add_scenario(Scenario(name="buy", executor="constant-vus", steps=[_get_step()], vus=5))
        .generate_script()
    )
    expected_block = (
        "export const options = {\n"
        "  browse: {\n"
        "    executor: 'shared-iterations',\n"
        "    rate: 10,\n"
        '    duration: "1m",\n'
        "  },\n"
        "  buy: {\n"
        "    executor: 'constant-vus',\n"
        "    vus: 5,\n"
        "  }\n"
        "};\n\n"
    )
    assert expected_block in script
    assert "export default function" not in script
    assert script.index("export function browse()") < script.index("export function buy()")
    assert script.endswith("}\n\n")


def test_unlisted_executor_passes_through():
    """Executor strings are not validated at build time."""
    script = (
        K6TestBuilder()
        .create_scenario("a", [_get_step()], executor="externally-controlled")
        .create_scenario("b", [_get_step()], executor="not-a-real-executor")
        .generate_script()
    )
    assert "  a: {\n    executor: 'externally-controlled',\n  }," in script
    assert "  b: {\n    executor: 'not-a-real-executor',\n  }\n" in script


def test_options_keep_insertion_order():
    """Options render in the order supplied, merged keys keep their place."""
    script = (
        K6TestBuilder()
        .set_options({"duration": "30s", "vus": 10})
        .set_options({"noConnectionReuse": True, "duration": "1m"})
        .generate_script()
    )
    assert 'export const options = {\n  "duration": "1m",\n  "vus": 10,\n  "noConnectionReuse": true\n};' in script


def test_set_options_merges_shallowly():
    """Disjoint keys are unioned, overlapping keys take the later value."""
    builder = (
        K6TestBuilder()
        .set_options({"vus": 1, "duration": "10s"})
        .set_options({"duration": "1m", "iterations": 100, "noConnectionReuse": True})
    )
    assert builder.config.options.to_dict() == {
        "vus": 1,
        "duration": "1m",
        "iterations": 100,
        "noConnectionReuse": True,
    }


def test_options_render_stages_and_thresholds():
    script = (
        K6TestBuilder()
        .set_options({
            "stages": [{"duration": "2m", "target": 100}],
            "thresholds": {"http_req_duration": ["p(95)<500"]},
        })
        .generate_script()
    )
    assert '"stages": [\n    {\n      "duration": "2m",\n      "target": 100\n    }\n  ]' in script
    assert '"http_req_duration": [\n      "p(95)<500"\n    ]' in script


def test_setup_and_teardown_wrap_raw_code():
    script = (
        K6TestBuilder()
        .set_raw_setup_code("  return { token: 'abc' };")
        .set_raw_teardown_code("  console.log(data.token);")
        .generate_script()
    )
    assert "export function setup() {\n  return { token: 'abc' };\n}\n\n" in script
    assert "export function teardown(data) {\n  console.log(data.token);\n}\n\n" in script
    assert script.index("setup()") < script.index("teardown(data)") < script.index("export default")


def test_body_is_serialized_when_present():
    step = Step(name="create user", request=k6_post("https://example.test/users", {"name": "kim", "age": 3}))
    script = K6TestBuilder().create_scenario("s", [step]).generate_script()
    assert "  // create user\n" in script
    assert "http.post('https://example.test/users', {\"name\":\"kim\",\"age\":3});" in script


def test_body_argument_omitted_when_absent():
    script = K6TestBuilder().create_scenario("s", [_get_step()]).generate_script()
    assert "http.get('https://example.test/health');" in script
    assert "undefined" not in script


def test_params_render_as_object_literal():
    step = Step(request=k6_get("https://example.test", params={"tags": {"name": "home"}, "timeout": "10s"}))
    script = K6TestBuilder().create_scenario("s", [step]).generate_script()
    assert "http.get('https://example.test', { tags: {\"name\":\"home\"}, timeout: \"10s\" });" in script


def test_headers_are_passed_in_params():
    step = Step(request=k6_get("https://example.test", headers={"Authorization": "Bearer t"}))
    script = K6TestBuilder().create_scenario("s", [step]).generate_script()
    assert "http.get('https://example.test', { headers: {\"Authorization\":\"Bearer t\"} });" in script


def test_sleep_and_multiple_checks():
    step = {
        "request": {"method": "GET", "url": "https://example.test"},
        "checks": [
            {"name": "status is 200", "condition": "(r) => r.status === 200"},
            {"name": "fast", "condition": "(r) => r.timings.duration < 300"},
        ],
        "sleep": 1.5,
    }
    script = K6TestBuilder().create_scenario("s", [step]).generate_script()
    assert (
        "  check(res, {'status is 200': (r) => r.status === 200, "
        "'fast': (r) => r.timings.duration < 300});\n"
        "  sleep(1.5);\n\n"
    ) in script


def test_steps_keep_order_and_are_separated():
    steps = [_get_step("https://example.test/a"), _get_step("https://example.test/b")]
    script = K6TestBuilder().create_scenario("s", steps).generate_script()
    assert (
        "  let res = http.get('https://example.test/a');\n\n"
        "  let res = http.get('https://example.test/b');\n\n"
    ) in script


def test_function_condition_is_rejected():
    """Python callables cannot run inside k6, so only text conditions are accepted."""
    with pytest.raises(ValidationError):
        Step(request=k6_get("https://example.test"), checks=[{"name": "x", "condition": lambda r: True}])


def test_save_script_writes_rendered_text(tmp_path):
    builder = K6TestBuilder().create_scenario("s", [_get_step()])
    target = tmp_path / "script.js"
    saved = builder.save_script(target)
    assert saved == str(target)
    assert target.read_text(encoding="utf-8") == builder.generate_script()
