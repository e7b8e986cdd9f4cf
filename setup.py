# setup.py
from setuptools import setup, find_packages

setup(
    name="kflisp",
    version="0.0.4",
    description="A minimal integer arithmetic Lisp: reader, evaluator, REPL and language server",
    packages=find_packages(include=["kflisp", "kflisp.*", "kflisp_lsp", "kflisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "kflisp=kflisp.repl:main",
            "kflisp-ls=kflisp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
