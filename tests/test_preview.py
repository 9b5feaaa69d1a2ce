from unittest.mock import MagicMock

from doctor_ic.preview import escape_markdown, patient_table, render_block, render_preview
from doctor_ic.layout import preview_block
from doctor_ic.state import AppState
from helpers import make_doctor


def fake_pane():
    pane = MagicMock()
    pane.columns.side_effect = lambda spec, **kw: [fake_pane() for _ in range(spec if isinstance(spec, int) else len(spec))]
    pane.container.side_effect = lambda **kw: fake_pane()
    return pane


def markdown_text(pane) -> str:
    return "\n".join(str(c.args[0]) for c in pane.markdown.call_args_list)


def test_table_block():
    pane = fake_pane()
    render_block(pane, preview_block(make_doctor("Dr. Lee", 3)))

    assert "Doctor: Dr. Lee" in markdown_text(pane)
    assert "TOTAL (INR) 30.00" in markdown_text(pane)
    df = pane.dataframe.call_args.args[0].data
    assert list(df.columns) == ["Patient Name", "Department", "Bill Date", "IC"]
    assert len(df) == 3


def test_summary_block():
    pane = fake_pane()
    render_block(pane, preview_block(make_doctor("Dr. Lee", 10, dept="CT")))

    pane.dataframe.assert_not_called()
    assert "Showing Summary Only" in markdown_text(pane)
    written = [c.args[0] for c in pane.write.call_args_list]
    assert written == ["Total Patients: 10", "MRI Count: 0", "CT Count: 10", "Total IC: 100.00"]


def test_preview_nothing_selected():
    parent = fake_pane()
    state = AppState().with_roster([make_doctor("Dr. Lee", 1)])
    assert render_preview(parent, state) == []
    parent.columns.assert_not_called()


def test_preview_single_doctor_uses_row_budget():
    parent = fake_pane()
    state = AppState().with_roster([make_doctor("Dr. Lee", 10)]).select_a("Dr. Lee")
    (block,) = render_preview(parent, state)
    assert not block.show_table


def test_preview_two_panes_side_by_side():
    parent = fake_pane()
    state = (
        AppState()
        .with_roster([make_doctor("Dr. Lee", 1), make_doctor("Dr. Smith", 2)])
        .select_a("Dr. Smith")
        .select_b("Dr. Lee")
    )
    blocks = render_preview(parent, state)
    assert [b.doctor_name for b in blocks] == ["Dr. Smith", "Dr. Lee"]
    parent.columns.assert_called_once_with(2, gap="medium")


def test_ic_column_is_right_aligned():
    html = patient_table(preview_block(make_doctor("Dr. Lee", 2))).to_html()
    assert "text-align: right" in html


def test_doctor_name_is_markdown_escaped():
    pane = fake_pane()
    render_block(pane, preview_block(make_doctor("Dr. *Star*_x $5", 1)))
    heading = pane.markdown.call_args_list[0].args[0]
    assert heading == r"**Doctor: Dr\. \*Star\*\_x \$5**"


def test_escape_markdown_leaves_plain_text():
    assert escape_markdown("Dr Lee") == "Dr Lee"
