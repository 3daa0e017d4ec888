from feed_enhancer.core import ItemSpan, locate_items


def test_spans_index_the_original_document(feed_with_sponsored):
    spans = locate_items(feed_with_sponsored)
    assert len(spans) == 3
    for span in spans:
        assert feed_with_sponsored[span.start:span.end] == span.text
        assert span.text.startswith("<item>")
        assert span.text.endswith("</item>")


def test_spans_are_ordered_and_disjoint(feed_with_sponsored):
    spans = locate_items(feed_with_sponsored)
    for previous, current in zip(spans, spans[1:]):
        assert previous.end <= current.start


def test_no_items():
    assert locate_items('<?xml version="1.0"?><rss><channel><title>Test Feed</title></channel></rss>') == []


def test_attributes_and_case_are_ignored():
    document = '<rss><ITEM id="1"><title>A</title></ITEM><item rdf:about="x"><title>B</title></item></rss>'
    spans = locate_items(document)
    assert [span.text for span in spans] == [
        '<ITEM id="1"><title>A</title></ITEM>',
        '<item rdf:about="x"><title>B</title></item>',
    ]


def test_items_element_is_not_an_item():
    assert locate_items("<items><title>Not an item</title></items>") == []


def test_identical_items_get_distinct_offsets():
    document = "<item><title>Same</title></item>\n<item><title>Same</title></item>"
    spans = locate_items(document)
    assert spans == [
        ItemSpan("<item><title>Same</title></item>", 0, 32),
        ItemSpan("<item><title>Same</title></item>", 33, 65),
    ]


def test_offsets_are_character_offsets_for_unicode():
    document = "<rss>Ünïcødé ✓ <item><title>Ελληνικά</title></item> 日本 <item><title>b</title></item></rss>"
    spans = locate_items(document)
    assert len(spans) == 2
    for span in spans:
        assert document[span.start:span.end] == span.text


def test_unclosed_item_is_left_alone():
    document = "<rss><item><title>open</title></rss>"
    assert locate_items(document) == []


def test_nested_item_ends_outer_span_at_first_closing_tag():
    document = "<rss><item><title>Outer</title><item><title>Inner</title></item></item></rss>"
    spans = locate_items(document)
    assert len(spans) == 1
    assert spans[0].text == "<item><title>Outer</title><item><title>Inner</title></item>"
    assert document[spans[0].end:] == "</item></rss>"
