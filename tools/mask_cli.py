# tools/mask_cli.py
# Aplica/remove máscaras pela linha de comando
#   python -m tools.mask_cli apply --mask "(00) 00000-0000" 11987654321
#   python -m tools.mask_cli apply --preset money 123456
#   python -m tools.mask_cli check --mask 00000-000 01310-100
from __future__ import annotations
import argparse
import json
import sys
from typing import List, Optional

from components.masks import PRESETS, preset
from services.mask_engine import apply_mask, is_complete, unmask
from services.translation import MaskConfigError


def _resolve(args) -> tuple[str, bool]:
    if getattr(args, "preset", None):
        return preset(args.preset)
    return args.mask, bool(getattr(args, "reverse", False))


def _cmd_apply(args) -> int:
    mask, reverse = _resolve(args)
    res = apply_mask(args.value, mask, reverse=reverse)
    if args.json:
        print(json.dumps({"formatted": res.formatted, "complete": res.complete}, ensure_ascii=False))
    else:
        print(res.formatted)
    return 0


def _cmd_unmask(args) -> int:
    print(unmask(args.value, args.mask))
    return 0


def _cmd_check(args) -> int:
    mask, _ = _resolve(args)
    ok = is_complete(args.value, mask)
    print("completo" if ok else "incompleto")
    return 0 if ok else 1


def _cmd_presets(args) -> int:
    for name, (mask, reverse) in sorted(PRESETS.items()):
        print(f"{name:<10} {mask}{'  (reversa)' if reverse else ''}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mask_cli", description="Máscaras de entrada")
    sub = p.add_subparsers(dest="cmd", required=True)

    ap = sub.add_parser("apply", help="formata um valor")
    g = ap.add_mutually_exclusive_group(required=True)
    g.add_argument("--mask")
    g.add_argument("--preset", choices=sorted(PRESETS))
    ap.add_argument("--reverse", action="store_true")
    ap.add_argument("--json", action="store_true")
    ap.add_argument("value")
    ap.set_defaults(func=_cmd_apply)

    up = sub.add_parser("unmask", help="remove os literais da máscara")
    up.add_argument("--mask", default=None)
    up.add_argument("value")
    up.set_defaults(func=_cmd_unmask)

    cp = sub.add_parser("check", help="valor preenche a máscara? (saída 0/1)")
    g = cp.add_mutually_exclusive_group(required=True)
    g.add_argument("--mask")
    g.add_argument("--preset", choices=sorted(PRESETS))
    cp.add_argument("value")
    cp.set_defaults(func=_cmd_check)

    pp = sub.add_parser("presets", help="lista as máscaras prontas")
    pp.set_defaults(func=_cmd_presets)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except MaskConfigError as ex:
        print(f"erro: {ex}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
