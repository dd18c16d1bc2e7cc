import sys

from invoke import run, task


class g:
    test_success = False


@task
def test(ctx, all=False):
    test_cmd = [
        "pytest",  # Test command
        "--cov-report term-missing",  # Print only uncovered lines to stdout
        "--cov python_mediatype",  # Test only this package
    ]

    # Test in this directory
    test_cmd.append("tests")

    res = run(" ".join(test_cmd), pty=False)
    g.test_success = res.ok


@task(pre=[test])
def fuzz(ctx, seconds=60):
    if not g.test_success:
        print("Tests must pass before fuzzing!", file=sys.stderr)
        return

    for harness in ("fuzz/fuzz_media_type.py", "fuzz/fuzz_canonicalized_map.py"):
        run(f"python {harness} -max_total_time={int(seconds)}")
