import pytest

from jtml.converter import convert, format_jtml
from jtml.errors import ConversionError, UnexpectedToken
from jtml.lexer import Kind, LexerError, Token

HEAD_SOURCE = """
head(){
    meta(charset="UTF-8")
    meta(http-equiv="X-UA-Compatible" content="IE=edge")
    title(){"document"}
}"""

NORMAL_SOURCE = """
html(lang="ja"){
    head(){
        meta(charset="UTF-8")
        meta(http-equiv="X-UA-Compatible" content="IE=edge")
        meta(name="viewport" content="width=device-width" initial-scale="1.0")
        title(){"document"}
    }
    body(){
        main(){
            h1(){"Hello World!"}
            img(hoge="hoge" huga="huga")
        }
    }
}"""

NORMAL_FORMATTED = """html(lang="ja"){
    head(){
        meta(charset="UTF-8")
        meta(http-equiv="X-UA-Compatible" content="IE=edge")
        meta(name="viewport" content="width=device-width" initial-scale="1.0")
        title(){
            "document"
        }
    }
    body(){
        main(){
            h1(){
                "Hello World!"
            }
            img(hoge="hoge" huga="huga")
        }
    }
}"""


@pytest.mark.parametrize(
    "source, expected",
    [
        ("p(){}", "<p></p>"),
        ("img()", "<img/>"),
        ('"string literal"', "string literal"),
        ("// comment", "<!--comment-->"),
    ],
)
def test_convert_single_simple_element(source, expected):
    assert convert(source, False) == expected


def test_convert_single_element_with_attribute():
    assert convert('p(class="btn"){}', False) == '<p class="btn"></p>'
    assert (
        convert('img(href="./images/img.png")', False)
        == '<img href="./images/img.png"/>'
    )


def test_convert_single_element_with_child():
    assert convert('p(){p(){"hello"}}', False) == "<p><p>hello</p></p>"


def test_convert_example_head():
    assert convert(HEAD_SOURCE, False) == (
        '<head><meta charset="UTF-8"/><meta http-equiv="X-UA-Compatible" '
        'content="IE=edge"/><title>document</title></head>'
    )


def test_convert_normal():
    assert convert(NORMAL_SOURCE, False) == (
        '<html lang="ja"><head><meta charset="UTF-8"/><meta '
        'http-equiv="X-UA-Compatible" content="IE=edge"/><meta name="viewport" '
        'content="width=device-width" initial-scale="1.0"/><title>document</title>'
        '</head><body><main><h1>Hello World!</h1><img hoge="hoge" huga="huga"/>'
        "</main></body></html>"
    )


def test_convert_ignores_comment_when_asked():
    assert convert("// comment", True) == ""
    assert convert('p(){// note\n"x"}', True) == "<p>x</p>"


def test_convert_lexer_error_is_wrapped():
    with pytest.raises(ConversionError) as info:
        convert('"string', False)
    assert info.value.cause == LexerError('"string')


def test_convert_parser_error_is_wrapped():
    with pytest.raises(ConversionError) as info:
        convert("}", False)
    cause = info.value.cause
    assert isinstance(cause, UnexpectedToken)
    assert cause.expected is Kind.IDENTIFIER
    assert cause.actual == Token(Kind.RIGHT_BRACKET)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("p(){}", "p(){\n}"),
        ("img()", "img()"),
        ('"string literal"', '"string literal"'),
        ("// comment", "// comment"),
    ],
)
def test_format_single_simple_element(source, expected):
    assert format_jtml(source) == expected


def test_format_single_element_with_attribute():
    assert format_jtml('p(class="btn"){}') == 'p(class="btn"){\n}'
    assert (
        format_jtml('img(href="./images/img.png")') == 'img(href="./images/img.png")'
    )


def test_format_single_element_with_child():
    assert format_jtml('p(){p(){"hello"}}') == 'p(){\n    p(){\n        "hello"\n    }\n}'


def test_format_example_head():
    assert format_jtml(HEAD_SOURCE) == (
        "head(){\n"
        '    meta(charset="UTF-8")\n'
        '    meta(http-equiv="X-UA-Compatible" content="IE=edge")\n'
        "    title(){\n"
        '        "document"\n'
        "    }\n"
        "}"
    )


def test_format_normal():
    assert format_jtml(NORMAL_SOURCE) == NORMAL_FORMATTED


def test_format_is_idempotent():
    assert format_jtml(NORMAL_FORMATTED) == NORMAL_FORMATTED


def test_format_then_convert_matches_convert():
    assert convert(format_jtml(NORMAL_SOURCE), False) == convert(NORMAL_SOURCE, False)


def test_format_error_is_wrapped():
    with pytest.raises(ConversionError) as info:
        format_jtml("/ comment")
    assert info.value.cause == LexerError("/")