import zlib

PROPOSAL_LINES = [
    'TCS Floor Service Proposal',
    'Customer: ABC Corporation',
    'Contact: John Smith',
    'Phone: 555-1234',
    'Service: VCT Floor Stripping and Waxing',
    'Square Footage: 5000 sq ft',
    'Total Cost: $2500.00',
]

def content_stream(lines: list[str]) -> bytes:
    ops = [b'BT', b'/F1 12 Tf', b'50 750 Td']
    for i, line in enumerate(lines):
        if i:
            ops.append(b'0 -20 Td')
        ops.append(b'(' + line.encode('latin-1') + b') Tj')
    ops.append(b'ET')
    return b'\n'.join(ops)

def make_pdf(contents: bytes, compress: bool = False) -> bytes:
    if compress:
        contents = zlib.compress(contents)
    filter_entry = b' /Filter /FlateDecode' if compress else b''
    objects = [
        b'<< /Type /Catalog /Pages 2 0 R >>',
        b'<< /Type /Pages /Kids [3 0 R] /Count 1 >>',
        b'<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>',
        b'<< /Length %d%s >>\nstream\n%s\nendstream' % (len(contents), filter_entry, contents),
        b'<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>',
    ]
    body = b''.join(b'%d 0 obj\n%s\nendobj\n\n' % (i + 1, obj) for i, obj in enumerate(objects))
    return b'%PDF-1.4\n' + body + b'trailer\n<< /Size 6 /Root 1 0 R >>\n%%EOF\n'
