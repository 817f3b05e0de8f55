def is_balanced(text):
    '''
    Return True if every parenthesis in text is matched and properly nested.

    Any other character is ignored.
    '''
    depth = 0
    for ch in text:
        if ch == '(':
            depth += 1
        elif ch == ')':
            if not depth:
                return False
            depth -= 1
    return depth == 0
