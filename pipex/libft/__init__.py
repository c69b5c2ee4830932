"""Small character, conversion, string, word, linked-list and line-reading helpers."""