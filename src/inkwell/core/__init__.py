"""
Core frontend: contract model, twin builder and the reserved-attribute eraser.
"""
