from setuptools import setup, find_packages

setup(
    name="docufresh",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        "pydantic>=2.5.3",
        "python-dotenv>=1.0.0",
        "beautifulsoup4>=4.12.0",
        "requests>=2.31.0",
        "click>=8.1.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "docufresh=docufresh.cli.render:main",
            "docufresh-html=docufresh.cli.html:main",
            "docufresh-markers=docufresh.cli.markers:main",
        ],
    },
    description="Keep documents fresh by replacing {{markers}} with live values",
    python_requires=">=3.8",
)
