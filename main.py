# === IMPORTS ===
#
# --- Standard Library ---
import sys

# --- Local Modules ---
from algorithms import ALGORITHMS, RABIN_KARP
from benchmark import DEMO_BASE, DEMO_PATTERNS, find_disagreements, run_all_algorithms
from render import format_match


# === CONSOLE DEMO ===

def run_demo(base=DEMO_BASE, patterns=DEMO_PATTERNS):
    """Prints every algorithm's matches and cost for the demo input."""
    for pattern in patterns:
        results = run_all_algorithms(base, pattern)
        for result in results:
            print(f"{result['name']}:")
            print(format_match(result["match"]))

        print(f"{'Algorithm':<30} | {'Time (ms)':<12} | {'Comparisons':<12}")
        print("-" * 60)
        for result in results:
            print(f"{result['name']:<30} | {result['time']:<12.4f} | {result['comparisons']:<12,}")

        disagreements = find_disagreements(results)
        for name, diff in disagreements.items():
            print(f"[Warning] {name} differs from the naive scan: extra {diff['extra']}, missing {diff['missing']}")
        print()


# === GUI ===

def run_gui(theme="light"):
    import tkinter as tk
    import sv_ttk
    from app import PatternMatcherApp

    root = tk.Tk()
    app = PatternMatcherApp(root)

    # --- Set the theme ---
    # Call this *after* creating the app instance
    sv_ttk.set_theme(theme)

    root.mainloop()
    return app


# === APPLICATION ENTRY POINT ===

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if "--demo" in args:
        run_demo()
    elif "--list" in args:
        for name in ALGORITHMS:
            note = " (hash matches are not verified)" if name == RABIN_KARP else ""
            print(f"{name}{note}")
    else:
        run_gui("dark" if "--dark" in args else "light")
    return 0


if __name__ == "__main__":
    sys.exit(main())
