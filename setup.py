from setuptools import setup
from setuptools import Command

try:
    import sage.version
except ImportError:
    raise ValueError("this package requires SageMath")

class TestCommand(Command):
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import subprocess
        if subprocess.call(['sage', '-tp', '--force-lib', 'src/']):
            raise SystemExit("Doctest failures")

setup(
    name = "ratpseries",
    version = "0.1",
    description = "Truncated power series of special functions over QQ",
    license = "GPL",
    packages = [
        "ratpseries",
        "ratpseries.examples",
    ],
    package_dir = {'': 'src/'},
    cmdclass = {'test': TestCommand},
    zip_safe=False,
)
