"""Tokenize a form in 3 lines: zero config, zero deps."""

from mallex import tokenize

tokens = tokenize('(defn greet [name] (str "hello " name)) ; greet')
print([t.text for t in tokens])
