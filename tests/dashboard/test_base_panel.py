"""
BasePanel HTML helper tests.
"""

from web_dashboard.panels.stages import StagesPanel


def _helpers():
    # Helpers never touch the listener; any concrete panel will do
    return StagesPanel()


class TestDataTable:

    def test_empty_rows_keep_header_and_body(self):
        html = _helpers().data_table(["A", "B"], [], table_id="t")
        assert '<table id="t" class="data-table">' in html
        assert "<th>A</th><th>B</th>" in html
        assert "<tbody></tbody>" in html

    def test_rows_in_given_order(self):
        html = _helpers().data_table(["N"], [["b"], ["a"], ["c"]])
        assert html.index("<td>b</td>") < html.index("<td>a</td>") < html.index("<td>c</td>")

    def test_colspan_header(self):
        html = _helpers().data_table([("Tasks", 2)], [])
        assert '<th colspan="2">Tasks</th>' in html

    def test_headers_escaped_cells_verbatim(self):
        html = _helpers().data_table(["<x>"], [["<b>bold</b>"]])
        assert "<th>&lt;x&gt;</th>" in html
        assert "<td><b>bold</b></td>" in html

    def test_sortable_table_class(self):
        html = _helpers().data_table(["A"], [], table_id="t", table_class="data-table sortable")
        assert html.startswith('<table id="t" class="data-table sortable">')

    def test_cell_classes(self):
        html = _helpers().data_table(["A", "B"], [["1", "2"]], cell_classes=["small", ""])
        assert '<td class="small">1</td><td>2</td>' in html


class TestProgressBar:

    def test_two_segments(self):
        html = _helpers().progress_bar(25.0, 50.0)
        assert html.startswith('<div class="progress">')
        assert html.index("bar-done") < html.index("bar-running")
        assert 'style="width: 25.0%"' in html
        assert 'style="width: 50.0%"' in html

    def test_widths_above_hundred_emitted(self):
        assert 'style="width: 150.0%"' in _helpers().progress_bar(150.0, 0.0)


class TestSmallHelpers:

    def test_link_escapes(self):
        html = _helpers().link("/x?a=1&b=2", "<name>")
        assert html == '<a href="/x?a=1&amp;b=2">&lt;name&gt;</a>'

    def test_stat_strip_preserves_order(self):
        html = _helpers().stat_strip({"CPU time": "1.0 s", "Shuffle read": "2.0 KB"})
        assert html.index("stat-cpu-time") < html.index("stat-shuffle-read")

    def test_auto_refresh_polls_when_visible(self):
        html = _helpers().auto_refresh("w", "/f", 7, "<p>x</p>")
        assert 'hx-get="/f"' in html
        assert "every 7s [document.visibilityState === 'visible']" in html

    def test_auto_refresh_disabled(self):
        html = _helpers().auto_refresh("w", "/f", 0, "<p>x</p>")
        assert html == '<div id="w">\n<p>x</p>\n</div>'

