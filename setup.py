import re
from pathlib import Path

from setuptools import find_packages, setup


def get_version():
    text = (Path(__file__).parent / 'fibwheel' / 'version.py').read_text()
    return re.search(r"__version__ = '([^']+)'", text).group(1)


setup(name='fibwheel',
      version=get_version(),
      description='Persistent Fibonacci heap built on circular lists',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.9',
      install_requires=['treelib>=1.6.4'],
      extras_require={'test': ['pytest', 'numpy']})
