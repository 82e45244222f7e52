"""
Couche domaine (core).

Contient les entites du catalogue et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, HTTP).
"""
