from setuptools import setup, find_packages
import re

# Read version from shussan/__init__.py
with open('shussan/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='shussan-calc',
    version=version,
    packages=find_packages(include=['shussan', 'shussan.*']),
    package_data={
        'shussan': ['rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'shussan-calc=shussan.cli.__main__:main',
            'shussan-calc-mcp=shussan.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Japanese maternity benefit (shussan teate-kin) and take-home pay estimates.',
    python_requires='>=3.10',
)
