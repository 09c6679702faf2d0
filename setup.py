"""setuptools packaging for RingTimer.

Install for development:
    pip install -e ".[test]"
"""

from setuptools import setup

setup(
    name="RingTimer",
    version="0.1.0",
    packages=[
        "ringtimer",
        "ringtimer.alarm",
        "ringtimer.database",
        "ringtimer.timer",
    ],
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
