from setuptools import setup, find_packages


# Read README for long description
def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Pattern-based request classification for performance-test reports"

setup(
    name="report-filter",
    version="0.1.0",
    description="Pattern-based request classification for performance-test reports",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["report_filter", "report_filter.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.0.0",
        "numpy>=1.18.0",
        "google-re2>=1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="regex, request filter, merge rules, load testing, reports",
)
