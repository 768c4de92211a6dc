"""Shared test configuration and fixtures."""

import pytest

SHEET_STYLE = """<style type="text/css">
.ritz .waffle a { color: inherit; }
.ritz .waffle .s0{background-color:#ffffff;text-align:left;color:#000000;font-family:'docs-Roboto',Arial;font-size:10pt;}
.ritz .waffle .s1{border-bottom:1px SOLID #000000;border-right:1px SOLID #000000;background-color:#d9ead3;text-align:center;font-weight:bold;color:#000000;font-family:Arial;font-size:12pt;}
.ritz .waffle .s2{border-left:none;background-color:#ffffff;color:rgb(255, 0, 0);font-style:italic;}
</style>"""

SHEET_BODY = """<div class="ritz grid-container" dir="ltr">
<table class="waffle" cellspacing="0" cellpadding="0">
<thead><tr><th class="row-header freezebar-origin-ltr"></th><th id="0C0" class="column-headers-background">A</th><th id="0C1" class="column-headers-background">B</th></tr></thead>
<tbody>
<tr style="height: 20px"><th id="0R0" class="row-headers-background"><div class="row-header-wrapper">1</div></th><td class="s1">Name</td><td class="s1">Total</td></tr>
<tr style="height: 20px"><th id="0R1" class="row-headers-background"><div class="row-header-wrapper">2</div></th><td class="s0">Tom &amp; Jerry</td><td class="s2"><div>12</div></td></tr>
<tr style="height: 20px"><th id="0R2" class="row-headers-background"><div class="row-header-wrapper">3</div></th><td class="s0"></td><td></td></tr>
<tr style="height: 20px"><th id="0R3" class="row-headers-background"><div class="row-header-wrapper">4</div></th><td class="s1"></td><td class="s0">&nbsp;</td></tr>
</tbody>
</table>
</div>"""


def make_html(style: str = "", body: str = "") -> str:
    """Wrap *style* and *body* into a minimal export document."""
    return (
        "<html><head><meta charset=\"utf-8\">"
        f"{style}</head><body>{body}</body></html>"
    )


def make_table(rows: list[str]) -> str:
    """A ``waffle`` table whose ``<tbody>`` holds the given ``<tr>`` markup."""
    return '<table class="waffle"><tbody>' + "".join(rows) + "</tbody></table>"


@pytest.fixture
def sheet_html() -> str:
    return make_html(SHEET_STYLE, SHEET_BODY)
