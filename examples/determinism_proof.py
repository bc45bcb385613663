#!/usr/bin/env python3
"""
Determinism Proof Demo

Shows that jsxparser renders are pure functions of (markup, bindings,
options) once key generation is pinned:

- Same markup + bindings → equal Element trees (keys disabled)
- Same seeded random source → equal generated keys
- Faults are reported, never raised, and report identically on replay
- A syntax error degrades the whole output, the same way every time

4 cases:
1. Static markup
2. Mapped list with explicit keys
3. Faulting expressions (missing member, throwing host call)
4. Unclosed tag (syntax error)
"""

import random
import sys
from pathlib import Path

# Ensure jsxparser is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from jsxparser import JsxParser


def explode():
    raise RuntimeError("sensor offline")


# ==========================================
# TEST CASES
# ==========================================

CASES = [
    (
        "Static Markup",
        '<main className="page"><h1>Title</h1><p style="margin: 0 1px">Body</p></main>',
        {},
    ),
    (
        "Mapped List",
        "<ul>{items.map(item => <li key={item.id}>{item.label.toUpperCase()}</li>)}</ul>",
        {"items": [{"id": 1, "label": "one"}, {"id": 2, "label": "two"}]},
    ),
    (
        "Faulting Expressions",
        "<div>{user.profile.name}</div><div>{explode()}</div><div>still rendered</div>",
        {"user": {}, "explode": explode},
    ),
    (
        "Unclosed Tag",
        "<h2>No closing tag",
        {},
    ),
]


def render_twice(markup, bindings, **options):
    """Render the same input twice with fresh parsers; returns both trees and fault lists."""
    runs = []
    for _ in range(2):
        faults = []
        parser = JsxParser(markup=markup, bindings=bindings, on_error=faults.append, **options)
        runs.append((parser.render(), [f"{type(f).__name__}: {f}" for f in faults]))
    return runs


# ==========================================
# TEST RUNNER
# ==========================================

def run_case(name, markup, bindings):
    print(f"\n{'='*70}")
    print(f"CASE: {name}")
    print(f"{'='*70}\n")
    print(f"Markup: {markup}")

    (tree1, faults1), (tree2, faults2) = render_twice(markup, bindings, disable_key_generation=True)
    print(f"\nOutput:  {tree1}")
    for fault in faults1:
        print(f"  fault: {fault}")

    same_tree = tree1 == tree2
    same_faults = faults1 == faults2
    print(f"\n  Tree match:  {'✅' if same_tree else '❌'}")
    print(f"  Fault match: {'✅' if same_faults else '❌'}")

    seeded1 = JsxParser(markup=markup, bindings=bindings, random_source=random.Random(42)).render()
    seeded2 = JsxParser(markup=markup, bindings=bindings, random_source=random.Random(42)).render()
    same_keys = seeded1 == seeded2
    print(f"  Seeded keys match: {'✅' if same_keys else '❌'}")

    return same_tree and same_faults and same_keys


# ==========================================
# MAIN
# ==========================================

def main():
    print("="*70)
    print("JSXPARSER: DETERMINISM PROOF")
    print("="*70)

    passed = 0
    failed = 0

    for name, markup, bindings in CASES:
        if run_case(name, markup, bindings):
            passed += 1
        else:
            failed += 1

    print(f"\n{'='*70}")
    print(f"RESULTS: {passed} passed, {failed} failed")
    print(f"{'='*70}\n")

    if failed > 0:
        print("❌ DETERMINISM PROOF FAILED")
        sys.exit(1)
    else:
        print("✅ DETERMINISM PROOF COMPLETE - ALL RENDERS IDENTICAL")
        sys.exit(0)


if __name__ == "__main__":
    main()
