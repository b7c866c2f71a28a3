from showcase.markdown import render_markdown


def test_plain_paragraph_is_wrapped_once() -> None:
    assert render_markdown("Just some plain text.") == "<p>Just some plain text.</p>"


def test_paragraph_text_is_escaped() -> None:
    html = render_markdown('Hello <world> & "friends"')

    assert html == "<p>Hello &lt;world&gt; &amp; &quot;friends&quot;</p>"


def test_headings_shift_one_level_down() -> None:
    html = render_markdown("# Title\n\n## Section\n\n### Detail")

    assert html == "<h2>Title</h2>\n<h3>Section</h3>\n<h4>Detail</h4>"


def test_deeper_headings_stay_literal() -> None:
    assert render_markdown("#### Too deep") == "<p>#### Too deep</p>"


def test_list_items_group_into_single_list() -> None:
    html = render_markdown("- one\n- two\n* three")

    assert html == "<ul><li>one</li><li>two</li><li>three</li></ul>"


def test_indented_items_do_not_nest() -> None:
    html = render_markdown("- parent\n  - child")

    assert html == "<ul><li>parent</li><li>child</li></ul>"


def test_blocks_are_never_double_wrapped() -> None:
    html = render_markdown("## Features\nIntro line\n- fast\n- small\n\nClosing words.")

    assert html == (
        "<h3>Features</h3>\n"
        "<p>Intro line</p>\n"
        "<ul><li>fast</li><li>small</li></ul>\n"
        "<p>Closing words.</p>"
    )
    assert "<p><h3>" not in html
    assert "<p><ul>" not in html


def test_soft_wraps_collapse_to_spaces() -> None:
    assert render_markdown("first line\nsecond line") == "<p>first line second line</p>"


def test_emphasis() -> None:
    html = render_markdown("**bold** and *italic*")

    assert html == "<p><strong>bold</strong> and <em>italic</em></p>"


def test_underscore_emphasis_stays_literal() -> None:
    html = render_markdown("_not italic_ and __not bold__ but **bold** in snake_case_name")

    assert html == (
        "<p>_not italic_ and __not bold__ but <strong>bold</strong> in snake_case_name</p>"
    )


def test_links_open_in_new_context() -> None:
    html = render_markdown("See [the docs](https://example.com/docs).")

    assert (
        '<a href="https://example.com/docs" target="_blank" rel="noopener noreferrer">the docs</a>'
        in html
    )


def test_script_links_are_not_rendered() -> None:
    html = render_markdown("[click](javascript:alert(1))")

    assert "<a" not in html
    assert "click" in html


def test_unsupported_syntax_renders_literally() -> None:
    html = render_markdown("1. first\n2. second\n\nUse `code` here")

    assert html == "<p>1. first 2. second</p>\n<p>Use `code` here</p>"


def test_empty_input_renders_nothing() -> None:
    assert render_markdown("") == ""
    assert render_markdown("  \n\n ") == ""
