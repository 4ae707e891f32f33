from setuptools import setup, find_packages

setup(
    name="lyricconv",
    version="0.1.0",
    description="Convert lyrics and subtitles between LRC, SubRip (SRT) and WebVTT, with offset and frame-rate correction",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="GPL-3.0-or-later",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"lyricconv": ["py.typed"]},
    install_requires=[
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    entry_points={
        "console_scripts": [
            "lyricconv=lyricconv.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Video",
        "Topic :: Text Processing",
        "Topic :: Utilities",
    ],
    keywords="lyrics subtitles lrc srt webvtt vtt converter ntsc pal",
)
