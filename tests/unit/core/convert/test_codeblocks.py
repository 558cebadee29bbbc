"""Unit tests for core/convert/codeblocks.py"""

import pytest

from mdpreview.config import Settings
from mdpreview.core.convert.codeblocks import detect_code_blocks, extract_code_blocks, find_code_blocks


def test_language_block_html():
    """A js fence becomes a classed <pre><code> element with escaped content."""
    result = extract_code_blocks("```js\nconst x = 1;\n```")
    assert result.text == (
        '<pre class="code-highlight"><code class="code-block language-js">const x = 1;</code></pre>'
    )
    assert result.total == 1
    assert result.blocks[0].is_complete


def test_content_is_escaped_ampersand_first():
    """All five characters are escaped, ampersand first, so existing entities are escaped once."""
    block = find_code_blocks("```html\n<a href=\"x\">'&lt;'</a>\n```")[0]
    assert block.escaped == "&lt;a href=&quot;x&quot;&gt;&#39;&amp;lt;&#39;&lt;/a&gt;"
    assert block.content == "<a href=\"x\">'&lt;'</a>"


def test_content_is_trimmed():
    """Leading and trailing blank lines and indentation are trimmed from the content."""
    block = find_code_blocks("```\n\n   indented\n\n```")[0]
    assert block.content == "indented"


def test_language_lowercased_for_class():
    """The recorded language keeps its case; the CSS class is lowercased."""
    block = find_code_blocks("```Python\nx\n```")[0]
    assert block.language == "Python"
    assert block.css_language == "python"
    assert "language-python" in block.html


def test_missing_language_uses_default():
    """A bare fence gets the configured default language class."""
    block = find_code_blocks("```\nx\n```")[0]
    assert block.language is None
    assert block.css_language == "plaintext"

    custom = find_code_blocks("```\nx\n```", Settings(default_language="text"))[0]
    assert "language-text" in custom.html


def test_unterminated_fence_flagged():
    """A fence with no closing backticks is matched to end of input and marked incomplete."""
    result = extract_code_blocks("intro\n```js\nconst x = 1;")
    assert result.total == 1
    assert result.has_incomplete
    block = result.blocks[0]
    assert not block.is_complete
    assert block.content == "const x = 1;"
    assert "```" not in result.text


def test_unterminated_fence_logs_warning(caplog):
    """An unterminated fence is logged at WARNING."""
    with caplog.at_level("WARNING"):
        extract_code_blocks("```js\nopen")
    assert "Unterminated code fence" in caplog.text


def test_blocks_replaced_in_place():
    """Surrounding text survives and block metadata records source offsets."""
    text = "before\n```py\na\n```\nmiddle\n```\nb\n```\nafter"
    result = extract_code_blocks(text)
    assert result.text.startswith("before\n<pre")
    assert "\nmiddle\n" in result.text
    assert result.text.endswith("</pre>\nafter")
    assert [b.index for b in result.blocks] == [0, 1]
    assert result.blocks[0].start == text.index("```py")
    assert result.blocks[1].original == "```\nb\n```"


def test_no_blocks_is_noop():
    """Text without fences is returned unchanged."""
    result = extract_code_blocks("# Just text\n")
    assert result.text == "# Just text\n"
    assert result.total == 0
    assert not result.has_incomplete


def test_placeholders_restore_to_html():
    """Placeholder extraction hides code from later passes and restores the same HTML."""
    text = "a\n```js\n# not a heading\n```\nb"
    merged = extract_code_blocks(text)
    hidden = extract_code_blocks(text, placeholders=True)
    assert "# not a heading" not in hidden.text
    assert "<pre" not in hidden.text
    assert hidden.restore(hidden.text) == merged.text


def test_custom_css_classes():
    """pre_class and code_class from settings are used in the block HTML."""
    settings = Settings(pre_class="hl", code_class="src")
    block = find_code_blocks("```c\nint x;\n```", settings)[0]
    assert block.html.startswith('<pre class="hl"><code class="src language-c">')


@pytest.mark.parametrize("text,count,incomplete", [
    ("",                               0, False),
    ("```js\nx\n```",                  1, False),
    ("```js\nx\n```\n```py\ny",        2, True),
    ("no code here",                   0, False),
])
def test_detect_code_blocks(text, count, incomplete):
    """Detection counts blocks and flags any unterminated one."""
    detection = detect_code_blocks(text)
    assert detection.count == count
    assert detection.has_incomplete is incomplete
