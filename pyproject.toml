[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking programs: a leaky-bucket simulator and TCP/UDP client-server pairs"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "sockets", "tcp", "udp", "leaky bucket", "traffic shaping"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-leaky = "netlab.leaky:main"
netlab-reverse-server = "netlab.tcp_reverse:server_main"
netlab-reverse-client = "netlab.tcp_reverse:client_main"
netlab-udp-server = "netlab.udp_echo:server_main"
netlab-udp-client = "netlab.udp_echo:client_main"
netlab-time-server = "netlab.udp_time:server_main"
netlab-time-client = "netlab.udp_time:client_main"
netlab-chat-server = "netlab.tcp_chat:server_main"
netlab-chat-client = "netlab.tcp_chat:client_main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
