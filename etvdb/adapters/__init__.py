"""
Couche infrastructure (adaptateurs).

- api/ : Transport HTTP et client TVDB
- xml/ : Tokenizer XML et decodage des entites HTML
- cli/ : Sorties console de la ligne de commande
"""
