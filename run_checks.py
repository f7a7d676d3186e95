import subprocess
import sys

# Each check writes its full output to a file next to this script.
CHECKS = [
    ("ruff", ["uv", "run", "ruff", "check", "src", "tests"], "ruff_output.txt"),
    ("mypy", ["uv", "run", "mypy", "src"], "mypy_output.txt"),
    ("pytest", ["uv", "run", "pytest", "-v"], "test_output.txt"),
]


def run_check(name, command, output_file):
    print(f"[{name}] {' '.join(command)}")
    try:
        with open(output_file, "w") as f:
            result = subprocess.run(command, stdout=f, stderr=subprocess.STDOUT, text=True)
    except OSError as e:
        print(f"[{name}] could not start: {e}")
        return 1
    status = "ok" if result.returncode == 0 else f"failed (exit {result.returncode}, see {output_file})"
    print(f"[{name}] {status}")
    return result.returncode


def main():
    failed = [name for name, command, output in CHECKS if run_check(name, command, output) != 0]
    if failed:
        print(f"\nFailed checks: {', '.join(failed)}")
        sys.exit(1)
    print("\nAll checks passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
