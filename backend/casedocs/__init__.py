"""Case document viewer backend"""
