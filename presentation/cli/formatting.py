"""Plain-text and JSON rendering of API results."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Iterable, List, Optional

from domain.entities import League, Match, Player, Series, Team, Tournament


def _when(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "TBD"


def _match_line(m: Match) -> str:
    score = ""
    if m.results and len(m.opponents) == 2:
        scores = [m.score_for(o.opponent.id) for o in m.opponents]
        score = " " + "-".join("?" if s is None else str(s) for s in scores)
    return f"{m.id:>8}  {m.status.value:<12} {_when(m.begin_at)}  {m.name}{score}"


def _player_line(p: Player) -> str:
    team = p.current_team.display_name if p.current_team else "-"
    return f"{p.id:>8}  {p.name:<20} {p.nationality or '--':<4} {team}"


def _team_line(t: Team) -> str:
    return f"{t.id:>8}  {t.display_name:<10} {t.name}  ({t.location or '-'}, {t.roster_size} players)"


def _tournament_line(t: Tournament) -> str:
    prize = f"  [{t.prizepool}]" if t.prizepool else ""
    return f"{t.id:>8}  {_when(t.begin_at)} -> {_when(t.end_at)}  {t.name}{prize}"


def _series_line(s: Series) -> str:
    return f"{s.id:>8}  {_when(s.begin_at)} -> {_when(s.end_at)}  {s.full_name}"


def _league_line(l: League) -> str:
    return f"{l.id:>8}  {l.name}"


_RENDERERS = (
    (Match, _match_line),
    (Player, _player_line),
    (Team, _team_line),
    (Tournament, _tournament_line),
    (Series, _series_line),
    (League, _league_line),
)


def render_line(item: Any) -> str:
    for kind, render in _RENDERERS:
        if isinstance(item, kind):
            return render(item)
    return str(item)


def render_text(items: Iterable[Any]) -> List[str]:
    lines = [render_line(item) for item in items]
    return lines or ["No results."]


def render_json(items: Iterable[Any]) -> str:
    payload = [item.to_dict() if hasattr(item, "to_dict") else item for item in items]
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
