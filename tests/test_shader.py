from connectlib.shader import (
    VERTEX_LAYOUT,
    Attribute,
    AttributeLayout,
    AttributeType,
    GeometryDrawData,
    GeometryDrawType,
    ShaderSource,
    ShaderStage,
    Viewport,
    read_sources,
    read_with_includes,
)


def test_vertex_layout_stride():
    layout = AttributeLayout([Attribute.POS, Attribute.UV])
    assert layout.stride == 16
    assert layout.stride == VERTEX_LAYOUT.stride
    assert VERTEX_LAYOUT.attributes == [Attribute.POS, Attribute.UV]


def test_layout_stride_is_sum_of_sizes():
    attributes = [
        Attribute(1, 0, AttributeType.VEC3_FLOAT, 12),
        Attribute(2, 1, AttributeType.FLOAT, 4),
    ]
    layout = AttributeLayout(attributes)
    assert layout.stride == 16


def test_attribute_locations():
    layout = AttributeLayout([Attribute.UV])
    assert layout.stride == 8
    assert layout.attributes[0].location == 1
    assert layout.attributes[0].type is AttributeType.VEC2_FLOAT
    assert Attribute.POS.location == 0


def test_draw_defaults():
    data = GeometryDrawData()
    assert data.draw_type is GeometryDrawType.TRIANGLE
    assert GeometryDrawType.DEFAULT is GeometryDrawType.TRIANGLE
    assert Viewport().max_depth == 1.0


def test_read_plain_file(tmp_path):
    path = tmp_path / "plain.glsl"
    path.write_text("line one\nline two")
    assert read_with_includes(str(path)) == "line one\nline two\n"


def test_read_with_include(tmp_path):
    (tmp_path / "common.glsl").write_text("float x;\n")
    main = tmp_path / "main.glsl"
    main.write_text("#include common.glsl\nvoid main()\n")
    assert read_with_includes(str(main)) == "float x;\n\nvoid main()\n"


def test_missing_file_gives_empty(tmp_path):
    assert read_with_includes(str(tmp_path / "missing.glsl")) == ""
    assert read_sources(str(tmp_path / "missing.glsl")) == []


def test_read_sources_splits_stages(tmp_path):
    path = tmp_path / "shader.glsl"
    path.write_text("#type vertex\nvoid vs()\n#type pixel\nvoid ps()\n")
    sources = read_sources(str(path))
    assert sources == [
        ShaderSource(ShaderStage.VERTEX, "\nvoid vs()\n"),
        ShaderSource(ShaderStage.PIXEL, "\nvoid ps()\n"),
    ]


def test_read_sources_follows_file_order(tmp_path):
    path = tmp_path / "compute.glsl"
    path.write_text("#type compute\nA\n#type geometry\nB\n")
    stages = [s.stage for s in read_sources(str(path))]
    assert stages == [ShaderStage.COMPUTE, ShaderStage.GEOMETRY]


def test_read_sources_with_included_stage(tmp_path):
    (tmp_path / "pixel.glsl").write_text("#type pixel\nvoid ps()\n")
    main = tmp_path / "main.glsl"
    main.write_text("#type vertex\nvoid vs()\n#include pixel.glsl\n")
    sources = read_sources(str(main))
    assert [s.stage for s in sources] == [ShaderStage.VERTEX, ShaderStage.PIXEL]
    assert "void ps()" in sources[1].source
    assert "void ps()" not in sources[0].source


def test_read_sources_without_markers(tmp_path):
    path = tmp_path / "none.glsl"
    path.write_text("void main()\n")
    assert read_sources(str(path)) == []