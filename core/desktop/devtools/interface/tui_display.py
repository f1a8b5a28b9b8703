"""Cell-width helpers for the TUI: wide (CJK) and zero-width characters count correctly."""

from typing import List, Tuple

from wcwidth import wcswidth, wcwidth

Fragment = Tuple[str, str]


class DisplayMixin:
    @staticmethod
    def _display_width(text: str) -> int:
        width = wcswidth(text)
        if width >= 0:
            return width
        # Non-printable characters make wcswidth give up; count the rest.
        return sum(max(0, wcwidth(ch)) for ch in text)

    def _ellipsize(self, text: str, width: int) -> str:
        """Cut text to `width` cells, ending with '…' when something was dropped."""
        if width <= 0:
            return ""
        if self._display_width(text) <= width:
            return text
        kept: List[str] = []
        used = 0
        for ch in text:
            w = max(0, wcwidth(ch))
            if used + w > width - 1:
                break
            kept.append(ch)
            used += w
        return "".join(kept) + "…"

    def _fragments_width(self, fragments: List[Fragment]) -> int:
        return sum(self._display_width(text) for _, text in fragments)

    def _fit_fragments(self, fragments: List[Fragment], width: int) -> List[Fragment]:
        """Trim styled fragments to `width` cells, ellipsizing the last visible one."""
        if self._fragments_width(fragments) <= width:
            return list(fragments)
        fitted: List[Fragment] = []
        used = 0
        for style, text in fragments:
            w = self._display_width(text)
            if used + w < width:
                fitted.append((style, text))
                used += w
                continue
            fitted.append((style, self._ellipsize(text, width - used)))
            break
        return fitted


__all__ = ["DisplayMixin", "Fragment"]
