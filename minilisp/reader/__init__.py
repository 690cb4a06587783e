from minilisp.reader.parser import lex, TokenStream, read_from_string, parse, read_all
