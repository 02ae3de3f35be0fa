# pnorm_ball/app.py
"""
Point central de l'application.
- lit la configuration (ligne de commande / fichier)
- initialise GPU + canvas + imgui
- relie panneau / clavier à la scène (SceneController)
- gère la boucle draw
"""

from imgui_bundle import imgui  # noqa: F401  Before rendercanvas
from rendercanvas.auto import RenderCanvas, loop
from wgpu.utils import get_default_device
from wgpu.utils.imgui import ImguiRenderer
import wgpu

from pnorm_ball.config import config_parser
from pnorm_ball.controller import SceneController
from pnorm_ball.gui import ControlPanel
from pnorm_ball.input_controller import InputController
from pnorm_ball.scene import Scene
from pnorm_ball.state import ViewerState


class App:
    def __init__(self, state: ViewerState, size=(900, 700)):
        self.state = state

        self.device = get_default_device()
        print("✅ Device:", self.device)

        self.canvas = RenderCanvas(title="P-norm ball", size=size)
        self.context = self.canvas.get_context("wgpu")
        self.texture_format = self.context.get_preferred_format(self.device.adapter)
        self.context.configure(device=self.device, format=self.texture_format)

        self.scene = Scene(self.canvas, self.device, aspect=size[0] / size[1])
        self.controller = SceneController(state, self.scene)

        self.imgui_renderer = ImguiRenderer(self.device, self.canvas)
        self.panel = ControlPanel(state, self.controller.apply, stats=self.controller.stats)
        self.inputs = InputController(self.canvas, self.scene, self.controller.apply)

        self.depth_tex = None
        self.depth_view = None
        self.depth_size = (0, 0)

    # ------------------------------------------------------------
    # BOUCLE
    # ------------------------------------------------------------
    def draw(self):
        tex = self.context.get_current_texture()
        view = tex.create_view()

        # depth = taille réelle de la swapchain (DPI)
        if self.depth_tex is None or self.depth_size != (tex.width, tex.height):
            self.depth_tex = self.device.create_texture(
                size=(tex.width, tex.height, 1),
                format=wgpu.TextureFormat.depth24plus,
                usage=wgpu.TextureUsage.RENDER_ATTACHMENT,
            )
            self.depth_view = self.depth_tex.create_view()
            self.depth_size = (tex.width, tex.height)
            self.scene.set_aspect(tex.width / max(tex.height, 1))

        self.scene.draw(view, self.depth_view)
        self.imgui_renderer.render()

        self.canvas.request_draw()

    def run(self):
        self.canvas.request_draw(self.draw)
        self.imgui_renderer.set_gui(self.panel.update_gui)
        loop.run()


def main(argv=None):
    parser = config_parser()
    args = parser.parse_args(argv)
    try:
        state = ViewerState.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    App(state, size=(args.width, args.height)).run()


if __name__ == "__main__":
    main()
