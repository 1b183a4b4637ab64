"""Order domain: schemas, status lifecycle and validation rules"""
