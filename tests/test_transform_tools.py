"""Tests for transform and decal parameter tools."""
from unittest.mock import MagicMock


def _capture_tools(register):
    tools = {}
    mock_mcp = MagicMock()
    def capture(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn
        return decorator
    mock_mcp.tool = capture
    register(mock_mcp)
    return tools


def _get_transform_tools():
    from mesh_decal.tools.transform import register_transform_tools
    return _capture_tools(register_transform_tools)


def _get_params_tools():
    from mesh_decal.tools.params import register_params_tools
    return _capture_tools(register_params_tools)


def test_set_decal_transform_updates_state():
    from mesh_decal.state import state
    tools = _get_transform_tools()
    result = tools["set_decal_transform"](position=[1, 2, 3], rotation=[90, 0, 0], scale=[2, 2, 0.5])
    assert "Decal transform" in result
    assert state.decal_transform.position == (1.0, 2.0, 3.0)
    assert state.decal_transform.rotation == (90.0, 0.0, 0.0)
    assert state.decal_transform.scale == (2.0, 2.0, 0.5)


def test_omitted_components_are_kept():
    from mesh_decal.state import state
    tools = _get_transform_tools()
    tools["set_target_transform"](position=[5, 0, 0], scale=[3, 3, 3])
    tools["set_target_transform"](rotation=[0, 45, 0])
    t = state.target_transform
    assert t.position == (5.0, 0.0, 0.0)
    assert t.rotation == (0.0, 45.0, 0.0)
    assert t.scale == (3.0, 3.0, 3.0)


def test_zero_scale_is_rejected():
    from mesh_decal.state import state
    tools = _get_transform_tools()
    result = tools["set_decal_transform"](scale=[1, 0, 1])
    assert result.startswith("Error")
    assert state.decal_transform.scale == (1.0, 1.0, 1.0)


def test_wrong_component_count_is_rejected():
    from mesh_decal.state import state
    tools = _get_transform_tools()
    result = tools["set_target_transform"](position=[1, 2])
    assert result.startswith("Error")
    assert state.target_transform.position == (0.0, 0.0, 0.0)


def test_transforms_are_independent():
    from mesh_decal.state import state
    tools = _get_transform_tools()
    tools["set_decal_transform"](position=[0, 4, 0])
    assert state.target_transform.position == (0.0, 0.0, 0.0)


def test_set_decal_params_updates_state():
    from mesh_decal.state import state
    tools = _get_params_tools()
    result = tools["set_decal_params"](offset=0.05, remove_backfaces=False, name="logo")
    assert "offset=0.05" in result
    assert state.params.offset == 0.05
    assert state.params.remove_backfaces is False
    assert state.params.name == "logo"
    assert state.params.keep_attributes_serialized is True


def test_set_decal_params_rejects_negative_offset():
    from mesh_decal.state import state
    tools = _get_params_tools()
    result = tools["set_decal_params"](offset=-1.0)
    assert result.startswith("Error")
    assert state.params.offset == 0.01


def test_set_decal_params_rejects_empty_name():
    tools = _get_params_tools()
    result = tools["set_decal_params"](name="")
    assert result.startswith("Error")
