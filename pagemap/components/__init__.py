"""Components layer - the discovery pipeline and its derived-view algorithms.

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities and DTOs (pure, stateless)
- components/ = pipeline stages, tree/chain algorithms, codecs (this layer)
- workflows/ = orchestration of components
- services/ = config, wiring, long-lived manifest state
- interfaces/ = HTTP/CLI presentation
"""
