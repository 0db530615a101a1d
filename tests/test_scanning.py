from docsniff.scanning import START_OF_STREAM, find_attribute_opener, find_preceding_significant_token
from docsniff.skipset import SkipSet
from docsniff.tokens import TokenKind as K, build_stream

SKIP = SkipSet.of(K.FINAL, K.READONLY, K.ABSTRACT)


def test_finds_doc_comment_behind_modifiers():
    tokens = build_stream([K.DOC_COMMENT_CLOSE_TAG, K.WHITESPACE, K.FINAL, K.WHITESPACE, K.CLASS, K.WHITESPACE, K.STRING])

    assert find_preceding_significant_token(tokens, 4, SKIP) == 0


def test_returns_sentinel_when_only_skippable_tokens_precede():
    tokens = build_stream([K.WHITESPACE, K.FINAL, K.WHITESPACE, K.CLASS])

    assert find_preceding_significant_token(tokens, 3, SKIP) == START_OF_STREAM


def test_stops_on_first_significant_token():
    tokens = build_stream([K.DOC_COMMENT_CLOSE_TAG, K.WHITESPACE, K.SEMICOLON, K.WHITESPACE, K.CLASS])

    assert find_preceding_significant_token(tokens, 4, SKIP) == 2


def test_out_of_range_start_fails_closed():
    tokens = build_stream([K.DOC_COMMENT_CLOSE_TAG, K.CLASS])

    assert find_preceding_significant_token(tokens, 0, SKIP) == START_OF_STREAM
    assert find_preceding_significant_token(tokens, -3, SKIP) == START_OF_STREAM
    assert find_preceding_significant_token(tokens, 10, SKIP) == START_OF_STREAM
    assert find_preceding_significant_token([], 1, SKIP) == START_OF_STREAM


def test_start_just_past_the_end_scans_from_last_token():
    tokens = build_stream([K.DOC_COMMENT_CLOSE_TAG, K.WHITESPACE])

    assert find_preceding_significant_token(tokens, 2, SKIP) == 0


def test_attribute_block_is_skipped_as_one_unit():
    tokens = build_stream(
        [
            K.DOC_COMMENT_CLOSE_TAG,
            K.WHITESPACE,
            K.ATTRIBUTE,
            K.STRING,
            K.OPEN_PARENTHESIS,
            K.CONSTANT_ENCAPSED_STRING,
            K.WHITESPACE,
            K.CLOSE_PARENTHESIS,
            K.ATTRIBUTE_END,
            K.WHITESPACE,
            K.CLASS,
        ]
    )

    assert find_preceding_significant_token(tokens, 10, SKIP) == 0


def test_doc_comment_inside_attribute_block_is_not_seen():
    tokens = build_stream([K.OPEN_TAG, K.WHITESPACE, K.ATTRIBUTE, K.DOC_COMMENT_CLOSE_TAG, K.ATTRIBUTE_END, K.WHITESPACE, K.CLASS])

    assert find_preceding_significant_token(tokens, 6, SKIP) == 0


def test_consecutive_attribute_blocks_are_all_skipped():
    tokens = build_stream(
        [
            K.DOC_COMMENT_CLOSE_TAG,
            K.ATTRIBUTE,
            K.STRING,
            K.ATTRIBUTE_END,
            K.WHITESPACE,
            K.ATTRIBUTE,
            K.STRING,
            K.ATTRIBUTE_END,
            K.WHITESPACE,
            K.FINAL,
            K.WHITESPACE,
            K.CLASS,
        ]
    )

    assert find_preceding_significant_token(tokens, 11, SKIP) == 0


def test_nested_attribute_blocks_match_outer_opener():
    tokens = build_stream([K.DOC_COMMENT_CLOSE_TAG, K.ATTRIBUTE, K.ATTRIBUTE, K.STRING, K.ATTRIBUTE_END, K.ATTRIBUTE_END, K.CLASS])

    assert find_attribute_opener(tokens, 5) == 1
    assert find_attribute_opener(tokens, 4) == 2
    assert find_preceding_significant_token(tokens, 6, SKIP) == 0


def test_unopened_attribute_block_fails_closed():
    tokens = build_stream([K.DOC_COMMENT_CLOSE_TAG, K.STRING, K.ATTRIBUTE_END, K.CLASS])

    assert find_attribute_opener(tokens, 2) == START_OF_STREAM
    assert find_preceding_significant_token(tokens, 3, SKIP) == START_OF_STREAM
