import sys
import subprocess
import datetime

def run(cmd: str):
    print(f"@ {cmd}")
    return subprocess.call(cmd, shell=True)

def python(script: str):
    return run(f"{sys.executable} {script}")

def test_f():
    run('pytest -v')

def demo_f():
    python('hexcat.py -s 7 hexwriter.py')

def stdin_f():
    python('hexcat.py -o pyproject.hex < pyproject.toml')
    run('cat pyproject.hex')

def all_f():
    test_f()
    demo_f()
    stdin_f()

def usage():
    [print(cmd[:-2]) for cmd in globals() if cmd.endswith('_f')]

for cmd in sys.argv[1:]:
    started = datetime.datetime.now()
    print(cmd)
    globals()[f"{cmd}_f"]()
    print(">", f"{datetime.datetime.now() - started}")

if len(sys.argv) < 2:
    usage()
