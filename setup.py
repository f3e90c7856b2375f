from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # Flet 1.x: the Margin/Padding/Border classmethod helpers are used by the UI
    # FletXr brings a matching Flet release; add --pre if only pre-releases are published
    # uv pip install FletXr --pre
    "flet>=1.0.0,<2",
    "FletXr",

    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",
]

extras_require = {
    # --- TESTS ---
    "test": [
        "pytest>=7.0",
        "pytest-asyncio>=0.23",
    ],
}

setup(
    name="potcatalog",
    version="1.0.0",
    description="Pot Catalog - catalogue flower pots, their location and flowers",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    package_data={"potcatalog.shared.config": ["settings/*.yaml"]},
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.10",
)
