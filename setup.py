from setuptools import setup

setup(
    name="graphbasic",
    version="0.1.0",
    author="Mitchell Kember",
    description="Directed graphs with depth-first reachability search",
    license="MIT",
    packages=["graphbasic", "graphbasic.templates"],
    python_requires=">=3.7",
    install_requires=["Jinja2>=3", "PyYAML>=5.1"],
    extras_require={"test": ["pytest"]},
    package_data={"graphbasic.templates": ["*.jinja"]},
    entry_points={"console_scripts": ["graphbasic = graphbasic.cli:main"]},
)
