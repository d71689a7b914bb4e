"""Resolve the font of every segment, the way a GUI text widget would."""

from unleashed_md import Markup

md = Markup()
for seg in md("Ada *sails* **north**\nto [Port Vell](places/port-vell)"):
    prefix = "\n" * seg.breaks_before
    links = f" -> {', '.join(seg.links)}" if seg.links else ""
    print(f"{prefix}{seg.font.name:<12} {seg.text!r}{links}")
