# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    "flet>=0.28.0",
    "FletXr",

    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",

    # --- CATALOG FETCHING ---
    "httpx>=0.27.0",

    # --- SANDBOX / STREAMLIT ---
    "streamlit>=1.35.0",        # Browser sandbox frontend
]

extras_require = {
    "test": [
        "pytest",
        "pytest-asyncio>=0.23",
    ],
}

setup(
    name="shopfront",
    version="1.0.0",
    description="Shopfront: shopping-cart demo with reactive Flet state",
    packages=find_packages(include=["shopfront", "shopfront.*"]),
    include_package_data=True,
    package_data={"shopfront.shared.config": ["settings/*.yaml"]},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "shopfront=shopfront.desktop.main:run",
        ],
    },
    python_requires=">=3.10",
)
