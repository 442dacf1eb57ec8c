# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
tagsmith is a library of immutable, fluent builders that render HTML elements to strings.
Element classes live in `tagsmith.form` (inputs) and `tagsmith.content` (content elements);
the global defaults registry and providers live in `tagsmith.factory`.
'''
