"""Sample markdown content for testing.

These fixtures represent markdown documents used for:
- Testing the Markdown event parser
- Testing LaTeX conversion of whole documents
- Testing the mdccc command-line filter

Rendered subset: headers, paragraphs, emphasis, strong, rules, breaks.
Everything else renders as plain text, except HTML and footnotes.
"""

# Headings, paragraphs and inline formatting
SAMPLE_MARKDOWN_SIMPLE = """# Test Page

This is a *simple* test page with **basic** formatting.

## Section 1

Some content in section 1.
"""

# Lists, quotes, code and links: structure is dropped, text is kept
SAMPLE_MARKDOWN_STRUCTURED = """> Quoted text

- Item 1
- Item 2

1. First
2. Second

Inline `code_span` and a [link](https://example.com "Example").

```python
print("100%")
```
"""

# Table with column alignments
SAMPLE_MARKDOWN_WITH_TABLE = """| Name | Value |
|:-----|------:|
| A | 1 |
| B | 2 |
"""

# Raw HTML block: conversion must fail
SAMPLE_MARKDOWN_WITH_HTML = """Before the block.

<div class="note">
Not representable.
</div>

After the block.
"""

# Footnote reference and definition: conversion must fail
SAMPLE_MARKDOWN_WITH_FOOTNOTE = """Text with a note.[^1]

[^1]: The note.
"""

# Soft break (single newline) and hard break (two trailing spaces)
SAMPLE_MARKDOWN_SOFT_BREAK = "first line\nsecond line\n"
SAMPLE_MARKDOWN_HARD_BREAK = "first line  \nsecond line\n"
