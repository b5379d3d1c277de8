"""Dashboard app package.

Staff tools: reservation lists, reservation detail editing and the
monthly room calendar where owners block and release nights.
"""
