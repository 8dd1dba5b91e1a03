from __future__ import annotations

import argparse

from api import run


def main() -> int:
    """ミンコフスキー島ビューアの CLI（UP/DOWN で深さ、SPACE で回転、R でリセット）。"""
    ap = argparse.ArgumentParser(description="Minkowski Island viewer")
    ap.add_argument("--depth", type=int, default=None, help="初期の再帰深さ（既定: 設定値）")
    ap.add_argument("--size", type=float, default=None, help="初期正方形の一辺 [px]")
    ap.add_argument("--width", type=int, default=None)
    ap.add_argument("--height", type=int, default=None)
    ap.add_argument("--fps", type=int, default=None)
    ap.add_argument("--background", default=None, help="#RRGGBB / #RRGGBBAA")
    ap.add_argument("--animate", action="store_true", help="起動直後から回転させる")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args()

    if (args.width is None) != (args.height is None):
        ap.error("--width と --height は同時に指定してください")
    window_size = (args.width, args.height) if args.width is not None else None

    run(
        depth=args.depth,
        size=args.size,
        window_size=window_size,
        fps=args.fps,
        background=args.background,
        animate=args.animate,
        log_level=args.log_level,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
