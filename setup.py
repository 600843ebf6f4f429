"""Package setup for link_checker."""

from setuptools import setup, find_packages

setup(
    name="link-checker",
    version="1.0.0",
    description="Broken-link checker for websites, driven by a sitemap or a same-origin crawl",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "link-checker=link_checker.cli:main",
        ],
    },
)
