"""
Request/response translation between the gateway contract and Adyen's API.

- authorization: composite reference token codec
- fields: request payload builders
- responses: response normalization and lookup tables
- sequencing: composite operation step runner
- scrubbing: transcript redaction
"""
