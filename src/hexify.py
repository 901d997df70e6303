import sys

def hex_literal(byte):
    return '0x' + hex(byte)[2:].upper()

def hexify(data):
    return '\n'.join(hex_literal(byte) for byte in data)

def print_hexify(f):
    # whole file is read before anything is printed
    input_bytes = f.read()
    print(hexify(input_bytes))

def main(argv=None):
    if argv is None:
        argv = sys.argv

    filename = argv[1]
    with open(filename, 'rb') as f_ptr:
        print_hexify(f_ptr)

if __name__=="__main__":
    main()
