"""Entrypoints (inbound adapters) for TERMLEVEL.

Expose the classifier to the outside world. Parse and validate inputs, call
`termlevel.classifier`, and present results.

Dependency rule: may import any `termlevel` module; nothing in the core
package imports from here.
"""
