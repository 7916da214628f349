"""Palette model helpers, contrast matrix and Markdown report."""

from huepass.palette.matrix import build_contrast_matrix, calculate_pair_contrast
from huepass.palette.model import (
    PaletteColor,
    camel_case_key,
    create_palette_color,
    generate_id,
    recolor,
    remove_color,
    rename_color,
    sanitize_key,
)
from huepass.palette.report import export_contrast_report

PALETTE = [
    PaletteColor("a", "Black", "#000000"),
    PaletteColor("b", "White", "#FFFFFF"),
    PaletteColor("c", "Gray", "#777777"),
]


def test_create_palette_color_normalizes_hex():
    color = create_palette_color("Sky Blue", "87ceeb")
    assert color.name == "Sky Blue"
    assert color.hex == "#87CEEB"
    assert color.id
    assert create_palette_color("Broken", "#12") is None


def test_generated_ids_are_unique():
    assert len({generate_id() for _ in range(200)}) == 200


def test_edits_return_new_lists():
    original = list(PALETTE)
    renamed = rename_color(PALETTE, "b", "Paper")
    recolored = recolor(PALETTE, "c", "abc")
    removed = remove_color(PALETTE, "a")

    assert PALETTE == original
    assert renamed[1] == PaletteColor("b", "Paper", "#FFFFFF")
    assert recolored[2].hex == "#AABBCC"
    assert recolor(PALETTE, "c", "nope") == PALETTE
    assert [col.id for col in removed] == ["b", "c"]


def test_sanitize_key():
    assert sanitize_key("Sky Blue") == "sky-blue"
    assert sanitize_key("sky-blue") == "sky-blue"
    assert sanitize_key("  Hello, World!! ") == "hello-world"
    assert sanitize_key("Hello, World!!", "_") == "hello_world"
    assert sanitize_key("___") == "unnamed"


def test_camel_case_key():
    assert camel_case_key("Sky Blue") == "skyBlue"
    assert camel_case_key("sky-blue") == "skyBlue"
    assert camel_case_key("PRIMARY text color") == "primaryTextColor"
    assert camel_case_key("Gray 500") == "gray_500"
    assert camel_case_key("500 Gray") == "_500Gray"
    assert camel_case_key("2nd accent") == "_2ndAccent"


def test_matrix_is_square_with_unit_diagonal():
    matrix = build_contrast_matrix(PALETTE)
    assert len(matrix) == 3
    assert all(len(row) == 3 for row in matrix)
    for i in range(3):
        assert matrix[i][i].ratio == 1.0
        assert matrix[i][i].compliance.normal_text_aa is False


def test_matrix_rows_are_backgrounds():
    matrix = build_contrast_matrix(PALETTE)
    for i, bg in enumerate(PALETTE):
        for j, fg in enumerate(PALETTE):
            assert matrix[i][j].background_id == bg.id
            assert matrix[i][j].foreground_id == fg.id
            assert matrix[i][j].ratio == matrix[j][i].ratio
    assert matrix[0][1].compliance.normal_text_aaa is True


def test_matrix_does_not_mutate_palette():
    colors = list(PALETTE)
    build_contrast_matrix(colors)
    assert colors == PALETTE


def test_malformed_hex_pairs_score_one():
    broken = PaletteColor("x", "Broken", "#zz")
    assert calculate_pair_contrast(broken, PALETTE[0]) == 1.0
    assert build_contrast_matrix([]) == []


def test_contrast_report():
    report = export_contrast_report(PALETTE, build_contrast_matrix(PALETTE))
    lines = report.split("\n")

    assert lines[0] == "# Color Contrast Report"
    assert "- **Black**: #000000" in lines
    assert "| Background \\ Foreground | Black | White | Gray |" in lines
    assert "| --- | --- | --- | --- |" in lines
    assert "| Black | 1.00:1 (Fail) | 21.00:1 (Pass) | 4.69:1 (Pass) |" in lines
    assert "| White | 21.00:1 (Pass) | 1.00:1 (Fail) | 4.48:1 (Fail) |" in lines
