[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sipmedia"
version = "0.1.0"
description = "Media plumbing for VoIP calls: G.711 codecs, comfort noise, RTP packets and sessions, RFC 2833 DTMF and SDP parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["voip", "rtp", "sdp", "g711", "ulaw", "alaw", "dtmf", "telephony"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Internet Phone",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sipmedia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
