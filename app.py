from geoprice import create_app
import os

config_object = 'config.ProdConfig' if os.getenv('RENDER') else 'config.DevConfig'
app = create_app(config_object)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8000")), debug=False)
