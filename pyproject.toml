[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "certsmaker"
version = "0.1.0"
description = "Write OpenSSL request configurations and issue self-signed TLS certificates for development, Kubernetes and Firefox"
requires-python = ">=3.10"
dependencies = []
keywords = ["tls", "ssl", "certificate", "self-signed", "openssl", "kubernetes", "firefox"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
certs-maker = "certsmaker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["certsmaker"]

[tool.pytest.ini_options]
addopts = "-ra"
