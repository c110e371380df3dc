"""
Services Layer

Pure fixture generation services that:
- Accept value objects (seeds, groups, venues, timestamps)
- Return fresh value objects (match plans, fixtures)
- Do NOT perform I/O or hold state between calls
- Raise FixtureGenerationError subclasses before producing any output
"""
