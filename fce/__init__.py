"""
FCE test classification and norm inference.
"""
