from feed_enhancer.core import FieldPair, extract_fields


def test_extracts_and_lowercases_title_and_description():
    item = "<item><title>Tech News</title><description>Latest TECH updates</description></item>"
    fields = extract_fields(item)
    assert fields == FieldPair(title="tech news", description="latest tech updates")


def test_missing_tags_yield_empty_strings():
    assert extract_fields("<item><link>https://example.com</link></item>") == FieldPair("", "")
    assert extract_fields("<item><title>Only Title</title></item>").description == ""


def test_tag_matching_is_case_insensitive():
    fields = extract_fields("<item><TITLE>Upper</TITLE><Description>Mixed</Description></item>")
    assert fields.title == "upper"
    assert fields.description == "mixed"


def test_first_occurrence_and_first_closing_tag_win():
    item = "<item><title>First</title><title>Second</title><description>a</description>b</description></item>"
    fields = extract_fields(item)
    assert fields.title == "first"
    assert fields.description == "a"


def test_empty_element_is_empty_field():
    assert extract_fields("<item><title></title></item>").title == ""


def test_entities_are_not_decoded():
    fields = extract_fields("<item><title>Tom &amp; Jerry</title></item>")
    assert fields.title == "tom &amp; jerry"


def test_content_spanning_lines_is_not_captured():
    fields = extract_fields("<item><title>Line one\nline two</title></item>")
    assert fields.title == ""
