"""Shared fixtures for the room finder tests."""

from __future__ import annotations

import pytest

from room_finder.config import Settings

TIMELINE_HTML = """
<html>
  <body>
    <table id="timeline">
      <thead>
        <tr><th>Room</th><th>Floor</th><th>Seats</th></tr>
      </thead>
      <tbody>
        <tr>
          <td class="name" data-sort="NE1">NE1</td>
          <td class="floor" data-sort="1">1st</td>
          <td class="size" data-sort="4">4</td>
        </tr>
        <tr>
          <td class="name" data-sort="Boardroom">Boardroom</td>
          <td class="floor" data-sort="2">2nd</td>
          <td class="size" data-sort="12">12</td>
        </tr>
        <tr>
          <td class="name" data-sort="Basement Pod">Basement Pod</td>
          <td class="floor" data-sort="-1">B1</td>
          <td class="size" data-sort="2">2</td>
        </tr>
      </tbody>
    </table>
    <div class="timeline-body">
      <div class="res_16699828 reserved tip" day="2019-11-01" reservation_id="16699828"
           room_keyname="ne1" room_name="NE1" seconds="37800.0" style="width: 58px;"
           tooltip="&lt;strong&gt;Team discussion&lt;/strong&gt;"></div>
      <div class="res_16699829 reserved tip" day="2019-11-01" reservation_id="16699829"
           room_keyname="boardroom" room_name="Boardroom" seconds="32400.0" style="width: 29px;"></div>
      <div class="res_16699830 reserved tip" day="2019-11-01" reservation_id="16699830"
           room_keyname="boardroom" room_name="Boardroom" seconds="43200.0" style="width: 116px;"></div>
      <div class="res_16699831 reserved tip" day="2019-11-01" reservation_id="16699831"
           room_keyname="gone" room_name="Closed Room" seconds="36000.0" style="width: 58px;"></div>
    </div>
  </body>
</html>
"""


@pytest.fixture
def timeline_html() -> str:
    return TIMELINE_HTML


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for name in ("TIMELINE_URL", "SECONDS_PER_PIXEL", "TIMEOUT_SECONDS", "DEFAULT_WINDOW_MINUTES", "LOG_LEVEL"):
        monkeypatch.delenv(f"ROOM_FINDER_{name}", raising=False)
    return Settings(timeline_url="https://rooms.example.test/")
