# jtml

JTML is a small markup language that compiles to HTML. Every element is
written as its tag name, its attributes in parentheses, and its children in
braces:

```
html(lang="ja"){
    head(){
        meta(charset="UTF-8")
        title(){"document"}
    }
    body(){
        // a comment
        h1(){"Hello World!"}
        img(src="./images/img.png")
    }
}
```

Text is written as double-quoted string literals, comments run from `//` to
the end of the line, and attribute values are string literals too. The void
tags `br`, `hr`, `img`, `input`, `meta`, `area`, `base`, `col`, `embed`,
`keygen`, `link`, `param` and `source` take no braces and are rendered as
self-closing tags such as `<img src="..."/>`.

## Installation

```
pip install .
```

## Command line

Convert one or more JTML files to HTML. Each output is written next to its
source with the extension replaced by `.html`; comments are dropped:

```
jtml-convert page.jtml other.jtml
```

Reformat files with four-space indentation. Each result is written next to its
source with the extension replaced by `.formatted_jtml`:

```
jtml-format page.jtml
```

Paths that are directories, files that cannot be read, files that fail to
compile, and outputs that cannot be created are reported on standard error and
skipped; the remaining files are still processed.

## Library

```python
from jtml.converter import convert, format_jtml

convert('p(class="btn"){"hello"}', False)
# '<p class="btn">hello</p>'

format_jtml('p(){p(){"hello"}}')
# 'p(){\n    p(){\n        "hello"\n    }\n}'
```

`convert(jtml, ignore_comment=False)` turns each comment into an HTML comment
unless `ignore_comment` is true. Both functions raise
`jtml.errors.ConversionError` when the input cannot be tokenized or parsed;
its `cause` attribute holds the underlying `jtml.lexer.LexerError` or
`jtml.errors.ParserError` (`UnexpectedToken`, `TokenIsNotEnough` or
`EmptyTokens`).

The lower layers are available as well:

- `jtml.lexer.tokenize(text)` returns a list of `Token` objects, each with a
  `Kind` and, for text-carrying kinds, a `value`.
- `jtml.parser.parse(tokens)` builds a `jtml.ast.Document`; the helpers
  `parse_nodes`, `parse_node`, `parse_attributes`, `parse_attribute` and
  `expect_token` work on a `collections.deque` of tokens.
- `jtml.ast` holds the node classes `Element`, `Text` and `Comment` plus
  `Document`; each offers `to_html` and `to_jtml`.

## Limitations

- Text and attribute values are copied to the output as written: characters
  such as `<` or `&` are not escaped, and escape sequences inside string
  literals (`\n`, `\t`, `\u`, `\"`) are kept literally rather than decoded.
- Only line comments are recognised; there are no block comments.
- There is no conversion from HTML back to JTML.

## Running the tests

```
pip install ".[test]"
pytest
```