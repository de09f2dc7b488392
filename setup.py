import os.path
import re

from setuptools import setup, find_packages


def read(fname):
    content = None
    with open(os.path.join(os.path.dirname(__file__), fname), 'r', encoding='utf-8') as f:
        content = f.read()
    return content

def read_version():
    match = re.search(r"^__version__\s*=\s*'([^']+)'", read('kuroneko/__init__.py'), re.M)
    return match.group(1)

setup(
    name='kuroneko',
    version=read_version(),
    author="kuroneko developers",
    license="GPL",
    keywords="track packages yamato kuroneko shipping",
    description='Track Yamato Transport parcels.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    long_description=read('README.rst'),
    install_requires=[
        'requests',
        'beautifulsoup4',
        'lxml',
    ],
    extras_require={
        'tests': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'kuroneko = kuroneko.__main__:main',
        ],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: GNU General Public License (GPL)",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Natural Language :: Japanese",
        "Programming Language :: Python :: 3"
    ]
)
