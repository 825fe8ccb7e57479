# app.py
"""
Entrypoint da aplicação.

Uso:
  python app.py                         (sessão interativa, pede a senha)
  python app.py relatorio movimentos.csv --tipo vendas
  python app.py logs --tipo vendas
"""

from inventario.adapters.cli import main

if __name__ == "__main__":
    main()
