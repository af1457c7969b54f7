# topmark:header:start
#
#   project      : MvnCheck
#   file         : __init__.py
#   file_relpath : src/mvncheck/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete build steps, in pipeline order.

- ``load``: resolve the project checkout
- ``validate``: require a ``pom.xml`` and create the check run
- ``command``: optional user setup command
- ``settings``: optional ``.m2/settings.xml``
- ``setup jdk``: install the requested JDK through SDKMAN
- ``mvn``: run Maven and turn its log into annotations
"""
