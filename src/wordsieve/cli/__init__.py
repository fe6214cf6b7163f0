"""
Command-line interface entry points for wordsieve.

Entry points:
- wsana: Anagram solving ('?' wildcard)
- wswordle: Wordle feedback filtering ('_' wildcard)
- wstrie: Compile a word list into a MARISA trie
"""
